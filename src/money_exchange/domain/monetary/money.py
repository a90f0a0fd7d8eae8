from __future__ import annotations

from decimal import Decimal, getcontext, InvalidOperation

from money_exchange.domain.monetary.currency import Currency
from money_exchange.utils.numeric_tools import DecimalLike, as_decimal

# Set high precision for financial calculations
getcontext().prec = 28


class Money:
    """Represents a monetary amount with currency.

    Immutable value object. Any Decimal-like amount is accepted: negative,
    zero and fractional amounts are valid and are never rounded to the
    currency's minor unit. Operations return new instances.
    """

    __slots__ = ("_amount", "_currency")

    def __init__(self, amount: DecimalLike, currency: Currency):
        """Initialize Money with amount and currency.

        Args:
            amount: Numeric amount (Decimal-like scalar).
            currency (Currency): Currency member.

        Raises:
            TypeError: If $currency is not a Currency member.
            ValueError: If $amount cannot be converted to Decimal.
        """
        # Raise: currency must be a member of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency member, but provided value is: {currency}")

        # Raise: $amount must be convertible to Decimal
        try:
            decimal_amount = as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $amount ({amount}) cannot be converted to Decimal") from e

        object.__setattr__(self, "_amount", decimal_amount)
        object.__setattr__(self, "_currency", currency)

    @property
    def amount(self) -> Decimal:
        """Get the decimal amount."""
        return self._amount

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    def __setattr__(self, name, value) -> None:
        raise AttributeError(f"`Money` is immutable; cannot set attribute '{name}'")

    def __delattr__(self, name) -> None:
        raise AttributeError(f"`Money` is immutable; cannot delete attribute '{name}'")

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.amount == other.amount

    def __hash__(self) -> int:
        """Hash based on amount and currency code."""
        return hash((self.amount, self.currency.code))

    # Scaling
    def __mul__(self, other):
        """Multiply Money by number (returns Money)."""
        if isinstance(other, Money):
            return NotImplemented  # Money * Money doesn't make sense
        # Imported here because `operations` depends on this module
        from money_exchange.bank.operations import multiply

        try:
            return multiply(self, other)
        except (ValueError, TypeError, InvalidOperation):
            return NotImplemented

    def __rmul__(self, other):
        """Right multiplication: number * Money."""
        return self.__mul__(other)

    # String representations
    def __str__(self) -> str:
        """Return string like '1000 KRW'."""
        return f"{self.amount} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(1000, KRW)'."""
        return f"{self.__class__.__name__}({self.amount}, {self.currency.code})"

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '1000.50 USD'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts

        try:
            amount = Decimal(amount_part)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        try:
            currency = Currency.from_str(currency_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e

        return cls(amount, currency)


# region Convenience constructors


def Dollar(amount: DecimalLike) -> Money:
    """Create Money in USD."""
    return Money(amount, Currency.USD)


def Won(amount: DecimalLike) -> Money:
    """Create Money in KRW."""
    return Money(amount, Currency.KRW)


def Yen(amount: DecimalLike) -> Money:
    """Create Money in JPY."""
    return Money(amount, Currency.JPY)


# endregion
