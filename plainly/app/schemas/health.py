"""
Health calculator schemas.

Result records and request bodies for plainly.app.utils.health_math
(BMI, calorie needs, water intake).

**Design Notes**:
- BMI categories carry a semantic BMIIndicator, never a literal colour;
  presentation layers map indicators to their own palette
- Activity levels are enums so multiplier lookup is exhaustive
- Water intake has its own, shorter activity scale (no "light" level)
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import Field

from plainly.app.schemas.common import CalculatorResult, CalculatorRequest, UnitSystem


class BMICategory(str, Enum):
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class BMIIndicator(str, Enum):
    """
    Semantic tag of a BMI category.

    - INFO: Underweight
    - SUCCESS: Normal weight
    - WARNING: Overweight
    - DANGER: Obese
    """
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    DANGER = "danger"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    """Activity level for TDEE (Mifflin-St Jeor multipliers)."""
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


class WaterActivityLevel(str, Enum):
    """Activity level for the water intake calculator."""
    SEDENTARY = "sedentary"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


# ============================================================================
# RESULTS
# ============================================================================

class WeightRange(CalculatorResult):
    """Weight bounds, in the unit of the weight given by the caller."""
    min: Decimal
    max: Decimal


class BMIResult(CalculatorResult):
    """
    Body Mass Index.

    Attributes:
        bmi: kg / m², rounded to 1 decimal
        category: WHO category of the rounded BMI
        healthy_weight_range: Weights giving BMI 18.5-24.9 at this height
        indicator: Semantic tag of the category
    """
    bmi: Decimal
    category: BMICategory
    healthy_weight_range: WeightRange
    indicator: BMIIndicator


class CalorieGoals(CalculatorResult):
    """Daily calories to lose, keep or gain weight (TDEE -500 / 0 / +500)."""
    lose: int
    maintain: int
    gain: int


class MacroSplit(CalculatorResult):
    """Grams per day for maintenance calories, 30/40/30 protein/carbs/fat."""
    protein: int
    carbs: int
    fat: int


class CalorieResult(CalculatorResult):
    bmr: int
    tdee: int
    goals: CalorieGoals
    macros: MacroSplit


class WaterIntakeResult(CalculatorResult):
    daily_intake_ml: int
    daily_intake_oz: int
    glasses: int = Field(..., description="Number of 8 oz glasses")


# ============================================================================
# REQUESTS
# ============================================================================

class BMIRequest(CalculatorRequest):
    weight: Decimal = Field(..., description="kg (metric) or lb (imperial)")
    height: Decimal = Field(..., description="cm (metric) or in (imperial)")
    unit: UnitSystem = UnitSystem.METRIC


class CalorieRequest(CalculatorRequest):
    weight: Decimal = Field(..., description="kg (metric) or lb (imperial)")
    height: Decimal = Field(..., description="cm (metric) or in (imperial)")
    age: int
    gender: Gender
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY
    unit: UnitSystem = UnitSystem.METRIC


class WaterIntakeRequest(CalculatorRequest):
    weight: Decimal = Field(..., description="kg (metric) or lb (imperial)")
    activity_level: WaterActivityLevel = WaterActivityLevel.SEDENTARY
    unit: UnitSystem = UnitSystem.METRIC
