"""
Grade point average calculation on the 4.0 scale.
"""
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from plainly.app.schemas.education import GPAResult, GradeEntry, LetterGrade
from plainly.app.utils.decimal_utils import round_decimal
from plainly.app.utils.validation_utils import DivisionByZeroError, within_decimal_range

GRADE_POINTS = MappingProxyType({
    LetterGrade.A_PLUS: Decimal("4.0"),
    LetterGrade.A: Decimal("4.0"),
    LetterGrade.A_MINUS: Decimal("3.7"),
    LetterGrade.B_PLUS: Decimal("3.3"),
    LetterGrade.B: Decimal("3.0"),
    LetterGrade.B_MINUS: Decimal("2.7"),
    LetterGrade.C_PLUS: Decimal("2.3"),
    LetterGrade.C: Decimal("2.0"),
    LetterGrade.C_MINUS: Decimal("1.7"),
    LetterGrade.D_PLUS: Decimal("1.3"),
    LetterGrade.D: Decimal("1.0"),
    LetterGrade.D_MINUS: Decimal("0.7"),
    LetterGrade.F: Decimal("0.0"),
    })


@within_decimal_range
def calculate_gpa(grades: Iterable[Union[GradeEntry, Mapping]]) -> GPAResult:
    """
    Credit-weighted grade point average.

    Args:
        grades: GradeEntry objects or dicts like {"grade": "B+", "credits": 3}

    Returns:
        GPAResult

    Raises:
        pydantic.ValidationError: If a grade is unknown or credits are negative
        DivisionByZeroError: If total credits are 0 (no courses, or only 0-credit ones)

    Example:
        >>> calculate_gpa([{"grade": "A", "credits": 3}, {"grade": "B+", "credits": 3}]).gpa
        Decimal('3.65')
    """
    total_points = Decimal(0)
    total_credits = Decimal(0)

    for item in grades:
        entry = item if isinstance(item, GradeEntry) else GradeEntry.model_validate(item)
        total_points += GRADE_POINTS[entry.grade] * entry.credits
        total_credits += entry.credits

    if total_credits == 0:
        raise DivisionByZeroError("total credits must not be zero", field="credits")

    return GPAResult(
        gpa=round_decimal(total_points / total_credits),
        total_credits=total_credits,
        total_points=round_decimal(total_points),
        )
