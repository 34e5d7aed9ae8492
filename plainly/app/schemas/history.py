"""
History record schema.

The engine persists nothing. This is the shape in which a presentation
layer stores a finished calculation in its own history/favorites storage:
{path, name, result_summary, type, timestamp}.
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from plainly.app.utils.datetime_utils import utcnow

SUMMARY_SEPARATOR = " | "


class HistoryEntry(BaseModel):
    """
    One calculation as remembered by the history collaborator.

    Attributes:
        path: Route of the calculator (e.g. "/finance/tip")
        name: Display name of the calculator
        result_summary: One-line summary of the top-level result values
        type: Calculator category (finance, health, dates, ...)
        timestamp: When the result was produced (UTC)
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    result_summary: str
    type: str
    timestamp: datetime

    @classmethod
    def from_result(
        cls,
        path: str,
        name: str,
        calculator_type: str,
        result: BaseModel,
        timestamp: Optional[datetime] = None
        ) -> HistoryEntry:
        """
        Build an entry from a result record.

        Only scalar top-level fields are summarized; schedules and nested
        records are left out to keep the summary on one line.

        Example:
            >>> HistoryEntry.from_result("/finance/tip", "Tip Calculator", "finance", tip_result).result_summary
            'tip_amount: 9.00 | total_amount: 59.00 | tip_per_person: 4.50 | total_per_person: 29.50'
        """
        parts = []
        for field_name, value in result.model_dump().items():
            if isinstance(value, (dict, list)):
                continue
            if isinstance(value, Decimal):
                value = str(value)
            elif hasattr(value, "value"):
                value = value.value
            parts.append(f"{field_name}: {value}")

        return cls(
            path=path,
            name=name,
            result_summary=SUMMARY_SEPARATOR.join(parts),
            type=calculator_type,
            timestamp=timestamp or utcnow(),
            )
