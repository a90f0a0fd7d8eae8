from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float

# Exchange ratios are rounded to this many decimal places by convention
RATIO_DECIMAL_PLACES = 5


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def decimal_places(value: Decimal) -> int:
    """Return how many significant decimal places $value carries.

    Trailing zeros do not count, so `Decimal("0.0010")` has 3 places.
    """
    exponent = value.normalize().as_tuple().exponent
    # Special values (NaN, Infinity) carry a string exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def is_conventionally_rounded_ratio(ratio: Decimal) -> bool:
    """Check whether $ratio respects the RATIO_DECIMAL_PLACES rounding convention."""
    return decimal_places(ratio) <= RATIO_DECIMAL_PLACES
