"""
Common schemas shared across calculator domains.

**Domain Coverage**:
- CalculatorResult: frozen base class for every result record
- CalculatorRequest: base class for HTTP request bodies
- UnitSystem: metric/imperial switch used by health formulas
- CalculationErrorResponse: body returned when a formula rejects its input

**Design Notes**:
- Results are value objects: frozen, no identity, returned by value
- All numeric fields use Decimal for precision
- Pydantic v2 with strict validation (extra="forbid")
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CalculatorResult(BaseModel):
    """
    Base class for formula results.

    Frozen so that a result, once computed, can be shared without copying.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)


class CalculatorRequest(BaseModel):
    """Base class for calculator request bodies."""
    model_config = ConfigDict(extra="forbid")


class UnitSystem(str, Enum):
    """
    Measurement system of weight/height inputs.

    - METRIC: kilograms and centimetres
    - IMPERIAL: pounds and inches
    """
    METRIC = "metric"
    IMPERIAL = "imperial"


class CalculationErrorResponse(BaseModel):
    """Error body for rejected calculator input (HTTP 400)."""
    model_config = ConfigDict(extra="forbid")

    detail: str = Field(..., description="Human readable error message")
    kind: str = Field(..., description="Error kind: division_by_zero, out_of_range")
    field: Optional[str] = Field(None, description="Input field that caused the error")
