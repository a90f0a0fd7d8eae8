from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from money_exchange.domain.monetary.currency import Currency
from money_exchange.utils.numeric_tools import DecimalLike, RATIO_DECIMAL_PLACES, as_decimal, is_conventionally_rounded_ratio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExchangeRate:
    """Directional rate from an (implicit) source currency into $target.

    One unit of the source currency equals $ratio units of $target. The
    source currency is the key under which the rate is stored in an
    `ExchangeTable`.

    Attributes:
        target (Currency): Currency the amount is converted into.
        ratio (Decimal): Units of $target per one unit of the source currency.
    """

    target: Currency
    ratio: Decimal

    def __post_init__(self) -> None:
        # Raise: target must be a member of Currency
        if not isinstance(self.target, Currency):
            raise TypeError(f"$target must be a Currency member, but provided value is: {self.target}")

        # Raise: $ratio must be convertible to Decimal
        try:
            ratio = as_decimal(self.ratio)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `ExchangeRate` because $ratio ({self.ratio}) cannot be converted to Decimal") from e
        object.__setattr__(self, "ratio", ratio)

        # Ratios are rounded by convention only; keep the value, but make it visible
        if not is_conventionally_rounded_ratio(ratio):
            logger.warning(f"ExchangeRate to {self.target.code} has $ratio ({ratio}) with more than {RATIO_DECIMAL_PLACES} decimal places")


RateLike = ExchangeRate | tuple[Currency, DecimalLike]


class ExchangeTable(Mapping[Currency, tuple[ExchangeRate, ...]]):
    """Read-only mapping from source currency to its ordered exchange rates.

    The table copies its input on construction and offers no way to change it
    afterwards. Only direct rates are stored: a `USD -> KRW` row says nothing
    about `KRW -> USD`.

    Examples:
        >>> table = ExchangeTable({Currency.KRW: [(Currency.USD, "0.0010")]})
        >>> table.rates_for(Currency.KRW)
        (ExchangeRate(target=<Currency.USD: 'USD'>, ratio=Decimal('0.0010')),)
    """

    __slots__ = ("_rates_by_source",)

    def __init__(self, rates: Mapping[Currency, Iterable[RateLike]] | None = None):
        """Build the table and validate every row.

        Args:
            rates: Mapping of source currency to an iterable of `ExchangeRate`
                or `(target, ratio)` pairs. Order of the rows is preserved.

        Raises:
            TypeError: If a source is not a Currency member or a row has unexpected shape.
            ValueError: If a ratio is not finite and positive or a row converts a currency into itself.
        """
        rates_by_source: dict[Currency, tuple[ExchangeRate, ...]] = {}
        for source, rows in (rates or {}).items():
            # Raise: source must be a member of Currency
            if not isinstance(source, Currency):
                raise TypeError(f"Exchange table $source must be a Currency member, but provided value is: {source}")

            rates_by_source[source] = tuple(self._build_rate(source, row) for row in rows)

        self._rates_by_source = rates_by_source

    @staticmethod
    def _build_rate(source: Currency, row: RateLike) -> ExchangeRate:
        if isinstance(row, ExchangeRate):
            rate = row
        elif isinstance(row, tuple) and len(row) == 2:
            rate = ExchangeRate(row[0], row[1])
        else:
            raise TypeError(f"Exchange table row for $source {source.code} must be an ExchangeRate or (target, ratio) pair, but provided value is: {row}")

        # Raise: ratio must be finite and positive to describe a valid conversion
        if not rate.ratio.is_finite() or rate.ratio <= 0:
            raise ValueError(f"Exchange rate {source.code} -> {rate.target.code} must have finite positive $ratio, but provided value is: {rate.ratio}")

        # Raise: a currency never converts into itself through the table
        if rate.target == source:
            raise ValueError(f"Exchange rate for $source {source.code} cannot target the same currency")

        return rate

    def rates_for(self, source: Currency) -> tuple[ExchangeRate, ...]:
        """Return the ordered rates for $source, or an empty tuple when it has no row."""
        return self._rates_by_source.get(source, ())

    def __getitem__(self, source: Currency) -> tuple[ExchangeRate, ...]:
        return self._rates_by_source[source]

    def __iter__(self) -> Iterator[Currency]:
        return iter(self._rates_by_source)

    def __len__(self) -> int:
        return len(self._rates_by_source)

    def __repr__(self) -> str:
        rows = ", ".join(f"{source.code}: [{', '.join(f'{rate.target.code} {rate.ratio}' for rate in rates)}]" for source, rates in self._rates_by_source.items())
        return f"{self.__class__.__name__}({{{rows}}})"
