"""
Decimal helpers shared by every formula module.

All calculators work on Decimal so that monetary results are exact and
repeatable: the same input always yields the same digits. Two helpers:

    from plainly.app.utils.decimal_utils import round_decimal, to_decimal

    to_decimal(0.1)                          # Decimal('0.1'), not the binary float
    round_decimal(Decimal("2.675"))          # Decimal('2.68')
    round_decimal(Decimal("-2.675"))         # Decimal('-2.68')  (half away from zero)
    round_decimal(Decimal("22.857"), 1)      # Decimal('22.9')
"""
from decimal import Decimal, InvalidOperation, Overflow, ROUND_HALF_UP
from typing import Union

from plainly.app.utils.validation_utils import OutOfRangeError

Number = Union[Decimal, int, float, str]

MONEY_DECIMAL_PLACES = 2


def to_decimal(value: Number, field_name: str = "value") -> Decimal:
    """
    Convert input to Decimal.

    Floats go through str() so that 0.1 becomes Decimal('0.1') instead of
    the exact binary expansion of the float.

    Args:
        value: Decimal, int, float or numeric string
        field_name: Argument name used in error messages

    Returns:
        Finite Decimal

    Raises:
        TypeError: If value is not a supported type (bool is rejected)
        OutOfRangeError: If value is not numeric, NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"{field_name} must be a Decimal, int, float or str, got {type(value)}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise OutOfRangeError(f"{field_name} is not a number: {value!r}", field=field_name)
    if not result.is_finite():
        raise OutOfRangeError(f"{field_name} must be finite, got {value!r}", field=field_name)
    return result


def round_decimal(value: Number, decimal_places: int = MONEY_DECIMAL_PLACES) -> Decimal:
    """
    Round half away from zero to the given number of decimal places.

    2.675 -> 2.68 and -2.675 -> -2.68: ties never round towards zero.

    Args:
        value: Value to round
        decimal_places: Digits after the decimal point (default: 2, cents)

    Returns:
        Rounded Decimal with exactly decimal_places digits

    Raises:
        OutOfRangeError: If the rounded value needs more than the 28 significant
            digits of the Decimal context (e.g. 1E+27 to cents)

    Example:
        >>> round_decimal(Decimal("1.005"))
        Decimal('1.01')
        >>> round_decimal(Decimal("1234.5"), 0)
        Decimal('1235')
    """
    quantizer = Decimal(1).scaleb(-decimal_places)
    value = to_decimal(value)
    try:
        return value.quantize(quantizer, rounding=ROUND_HALF_UP)
    except (InvalidOperation, Overflow) as e:
        raise OutOfRangeError(
            f"{value} is too large to round to {decimal_places} decimal places"
            ) from e
