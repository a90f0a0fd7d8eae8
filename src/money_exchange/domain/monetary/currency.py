from __future__ import annotations

from enum import Enum


class Currency(Enum):
    """Closed set of supported currencies.

    Members carry their ISO 4217 code as value. Adding a currency means adding
    a member here and its rows to the exchange table.

    Members:
        USD: US Dollar.
        KRW: South Korean Won.
        JPY: Japanese Yen.
    """

    USD = "USD"
    KRW = "KRW"
    JPY = "JPY"

    @property
    def code(self) -> str:
        """Get the currency code."""
        return self.value

    @classmethod
    def from_str(cls, code: str) -> Currency:
        """Get currency by its code.

        Args:
            code (str): Currency code to look up; case and surrounding whitespace are ignored.

        Returns:
            Currency: The matching member.

        Raises:
            TypeError: If $code is not a string.
            ValueError: If $code does not name a supported currency.
        """
        if not isinstance(code, str):
            raise TypeError(f"$code must be a string, but provided value is: {code}")

        normalized = code.upper().strip()
        try:
            return cls(normalized)
        except ValueError as e:
            available = [member.code for member in cls]
            raise ValueError(f"Currency with code '{normalized}' is not supported. Available currencies: {available}") from e

    def __str__(self) -> str:
        return self.code
