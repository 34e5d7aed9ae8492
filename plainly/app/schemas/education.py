"""
Grade point average schemas.
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import Field, field_validator

from plainly.app.schemas.common import CalculatorResult, CalculatorRequest


class LetterGrade(str, Enum):
    """US letter grades, A+ through F."""
    A_PLUS = "A+"
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D_PLUS = "D+"
    D = "D"
    D_MINUS = "D-"
    F = "F"


class GradeEntry(CalculatorRequest):
    """
    One course: its letter grade and credit hours.

    Grades are case-insensitive ("b+" == "B+"). Unknown grades are rejected
    here rather than silently counted as 0 points.
    """
    grade: LetterGrade
    credits: Decimal = Field(..., ge=0, description="Credit hours of the course")

    @field_validator("grade", mode="before")
    @classmethod
    def normalize_grade(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


class GPARequest(CalculatorRequest):
    grades: List[GradeEntry]


class GPAResult(CalculatorResult):
    """
    Attributes:
        gpa: Σ(points * credits) / Σcredits, rounded to 2 decimals
        total_credits: Σcredits
        total_points: Σ(points * credits), rounded to 2 decimals
    """
    gpa: Decimal
    total_credits: Decimal
    total_points: Decimal
