"""Currency conversion and arithmetic over Money values."""

from money_exchange.bank.operations import add, multiply
from money_exchange.bank.rate_lookup import RateFound, RateLookupResult, RateNotFound, RateNotFoundError, lookup_rate

__all__ = [
    "add",
    "multiply",
    "lookup_rate",
    "RateFound",
    "RateNotFound",
    "RateLookupResult",
    "RateNotFoundError",
]
