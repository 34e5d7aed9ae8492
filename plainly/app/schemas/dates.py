"""
Date calculator schemas (age and next birthday).
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import Field, field_validator

from plainly.app.schemas.common import CalculatorResult, CalculatorRequest
from plainly.app.utils.datetime_utils import parse_ISO_date


class AgeResult(CalculatorResult):
    """
    Calendar age at a target date.

    Attributes:
        years, months, days: Calendar-correct difference (months < 12, days < 31)
        total_days: Exact number of days between the two dates
        total_weeks: Whole weeks in total_days
        total_months: years * 12 + months
        next_birthday: First anniversary strictly after the target date
        days_until_birthday: Days from the target date to next_birthday (1..366)
    """
    years: int
    months: int
    days: int
    total_days: int
    total_weeks: int
    total_months: int
    next_birthday: date
    days_until_birthday: int


class AgeRequest(CalculatorRequest):
    birth_date: date
    target_date: Optional[date] = Field(None, description="Defaults to today (UTC)")

    @field_validator("birth_date", "target_date", mode="before")
    @classmethod
    def parse_dates(cls, v):
        if isinstance(v, (str, date)):
            return parse_ISO_date(v)
        return v
