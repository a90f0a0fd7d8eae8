"""Direct exchange-rate lookup.

Lookups never compose rates: a missing `source -> target` row is a miss even
when a path through a third currency exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal, TypeAlias

from money_exchange.domain.monetary.currency import Currency
from money_exchange.domain.monetary.exchange_rate import ExchangeTable
from money_exchange.domain.monetary.exchange_rate_registry import DEFAULT_EXCHANGE_TABLE


class RateNotFoundError(Exception):
    """Raised when no direct exchange rate is defined for an ordered currency pair."""

    def __init__(self, source: Currency, target: Currency, reason: str):
        self.source = source
        self.target = target
        self.reason = reason
        super().__init__(f"No exchange rate defined for {source.code} -> {target.code}: {reason}")


@dataclass(frozen=True)
class RateFound:
    """Successful lookup carrying the direct $ratio from $source into $target."""

    source: Currency
    target: Currency
    ratio: Decimal

    @property
    def found(self) -> Literal[True]:
        return True

    def unwrap(self) -> Decimal:
        return self.ratio


@dataclass(frozen=True)
class RateNotFound:
    """Failed lookup; $error describes which part of the table was missing."""

    source: Currency
    target: Currency
    error: RateNotFoundError

    @property
    def found(self) -> Literal[False]:
        return False

    def unwrap(self) -> Decimal:
        """Raise the carried error for callers that prefer exception flow.

        Raises:
            RateNotFoundError: Always.
        """
        raise self.error


RateLookupResult: TypeAlias = RateFound | RateNotFound


def lookup_rate(source: Currency, target: Currency, table: ExchangeTable = DEFAULT_EXCHANGE_TABLE) -> RateLookupResult:
    """Find the direct rate converting one unit of $source into $target.

    Rows for $source are scanned in table order and the first one targeting
    $target wins. Equal currencies are not special-cased.

    Args:
        source: Currency being converted from.
        target: Currency being converted into.
        table: Exchange table to search; defaults to the process-wide table.

    Returns:
        `RateFound` with the ratio, or `RateNotFound` carrying a `RateNotFoundError`.
    """
    rates = table.rates_for(source)
    if not rates:
        error = RateNotFoundError(source, target, f"$source {source.code} has no exchange rates")
        return RateNotFound(source, target, error)

    for rate in rates:
        if rate.target == target:
            return RateFound(source, target, rate.ratio)

    listed_targets = [rate.target.code for rate in rates]
    error = RateNotFoundError(source, target, f"$source {source.code} lists rates only into {listed_targets}")
    return RateNotFound(source, target, error)
