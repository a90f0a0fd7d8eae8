__version__ = "0.0.1"

from money_exchange.domain.monetary.currency import Currency
from money_exchange.domain.monetary.money import Money, Dollar, Won, Yen
from money_exchange.domain.monetary.exchange_rate import ExchangeRate, ExchangeTable
from money_exchange.domain.monetary.exchange_rate_registry import DEFAULT_EXCHANGE_TABLE
from money_exchange.bank.rate_lookup import RateNotFoundError, lookup_rate
from money_exchange.bank.operations import add, multiply

__all__ = [
    "Currency",
    "Money",
    "Dollar",
    "Won",
    "Yen",
    "ExchangeRate",
    "ExchangeTable",
    "DEFAULT_EXCHANGE_TABLE",
    "RateNotFoundError",
    "lookup_rate",
    "add",
    "multiply",
]
