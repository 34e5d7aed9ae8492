"""
Unit conversion schemas.
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Dict, List

from pydantic import Field

from plainly.app.schemas.common import CalculatorResult, CalculatorRequest


class UnitCategory(str, Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    VOLUME = "volume"


class ConversionRequest(CalculatorRequest):
    category: UnitCategory
    conversion: str = Field(..., description="Conversion id, e.g. m_to_ft")
    value: Decimal


class ConversionResult(CalculatorResult):
    category: UnitCategory
    conversion: str
    value: Decimal
    result: Decimal


class ConversionCatalogResponse(CalculatorResult):
    """Available conversion ids per category."""
    conversions: Dict[UnitCategory, List[str]]
