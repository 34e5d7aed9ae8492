"""
Input validation for the calculation engine.

Formulas never return 0 or Infinity for degenerate input. They call the
require_* helpers below, which raise a CalculationError subclass naming the
offending argument:

- DivisionByZeroError: a value used as a denominator is zero
  (splitting a bill 0 ways, zero total credits, ...)
- OutOfRangeError: a value lies outside the formula's domain
  (negative amounts, zero-term loan, birth date after target date, ...)

CalculationError derives from ValueError so callers that already handle
ValueError (pydantic validators, API endpoints) keep working unchanged.

Finite inputs can still push an intermediate result past the limits of the
Decimal context (28 significant digits, exponent 999999). Public formulas
are wrapped with @within_decimal_range so those traps surface as
CalculationError too.
"""
import decimal
import functools
from decimal import Decimal
from typing import Optional


class CalculationError(ValueError):
    """Base exception for rejected calculator input."""

    kind = "calculation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DivisionByZeroError(CalculationError):
    """Raised when a denominator input is zero."""

    kind = "division_by_zero"


class OutOfRangeError(CalculationError):
    """Raised when an input is outside the domain of a formula."""

    kind = "out_of_range"


def require_non_zero(value: Decimal, field_name: str) -> Decimal:
    """
    Ensure a denominator is not zero.

    Raises:
        DivisionByZeroError: If value == 0

    Examples:
        >>> require_non_zero(Decimal("4"), "people")
        Decimal('4')
        >>> require_non_zero(Decimal("0"), "people")  # DivisionByZeroError
    """
    if value == 0:
        raise DivisionByZeroError(f"{field_name} must not be zero", field=field_name)
    return value


def require_non_negative(value: Decimal, field_name: str) -> Decimal:
    """Ensure value >= 0, raising OutOfRangeError otherwise."""
    if value < 0:
        raise OutOfRangeError(f"{field_name} must be non-negative, got {value}", field=field_name)
    return value


def require_positive(value: Decimal, field_name: str) -> Decimal:
    """Ensure value > 0, raising OutOfRangeError otherwise."""
    if value <= 0:
        raise OutOfRangeError(f"{field_name} must be positive, got {value}", field=field_name)
    return value


def require_in_range(value: Decimal, low: Decimal, high: Decimal, field_name: str) -> Decimal:
    """Ensure low <= value <= high, raising OutOfRangeError otherwise."""
    if value < low or value > high:
        raise OutOfRangeError(
            f"{field_name} must be between {low} and {high}, got {value}",
            field=field_name
            )
    return value


def require_whole_number(value: Decimal, field_name: str) -> int:
    """
    Ensure value has no fractional part and return it as int.

    Used for counts (people, months, years of a term) that the formulas
    iterate over or divide by.
    """
    if value != value.to_integral_value():
        raise OutOfRangeError(f"{field_name} must be a whole number, got {value}", field=field_name)
    return int(value)


def within_decimal_range(func):
    """
    Decorator: re-raise Decimal context traps of a formula as CalculationError.

    - decimal.Overflow, decimal.InvalidOperation -> OutOfRangeError
      (e.g. 1.05 ** 20000 cannot be quantized to cents in 28 digits)
    - decimal.DivisionByZero -> DivisionByZeroError
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except decimal.DivisionByZero as e:
            raise DivisionByZeroError(f"{func.__name__}: division by zero") from e
        except (decimal.Overflow, decimal.InvalidOperation) as e:
            raise OutOfRangeError(
                f"{func.__name__}: inputs too large to compute at Decimal precision ({type(e).__name__})"
                ) from e
    return wrapper
