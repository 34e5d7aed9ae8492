"""
Pydantic schemas for Plainly.

Input records and result records of the calculation engine. Results are
frozen value objects created by one call and returned by value.

**Organization by Domain**:
- common.py: Base classes (CalculatorResult, CalculatorRequest), UnitSystem, error body
- finance.py: Tip, percentage, compound interest, loan, mortgage, discount
- health.py: BMI, calories, water intake
- dates.py: Age
- education.py: GPA
- conversions.py: Unit conversion
- history.py: History record contract
- provider.py: AI collaborator request options
- utilities.py: Random picker and health check

**Design Notes**:
- All models use Pydantic v2 with strict validation (extra="forbid")
- Schemas separated from API layer (no inline definitions)
"""
from plainly.app.schemas.common import (
    CalculatorResult,
    CalculatorRequest,
    UnitSystem,
    CalculationErrorResponse,
    )
from plainly.app.schemas.conversions import (
    UnitCategory,
    ConversionRequest,
    ConversionResult,
    ConversionCatalogResponse,
    )
from plainly.app.schemas.dates import AgeRequest, AgeResult
from plainly.app.schemas.education import LetterGrade, GradeEntry, GPARequest, GPAResult
from plainly.app.schemas.finance import (
    CompoundFrequency,
    PercentageOperation,
    TipResult,
    PercentageResult,
    YearlyBalance,
    CompoundInterestResult,
    AmortizationEntry,
    LoanResult,
    MortgageResult,
    DiscountResult,
    TipRequest,
    PercentageRequest,
    CompoundInterestRequest,
    LoanRequest,
    MortgageRequest,
    DiscountRequest,
    )
from plainly.app.schemas.health import (
    BMICategory,
    BMIIndicator,
    Gender,
    ActivityLevel,
    WaterActivityLevel,
    WeightRange,
    BMIResult,
    CalorieGoals,
    MacroSplit,
    CalorieResult,
    WaterIntakeResult,
    BMIRequest,
    CalorieRequest,
    WaterIntakeRequest,
    )
from plainly.app.schemas.history import HistoryEntry
from plainly.app.schemas.provider import TextCompletionOptions, ImageSize

__all__ = [
    # Common
    "CalculatorResult",
    "CalculatorRequest",
    "UnitSystem",
    "CalculationErrorResponse",
    # Finance
    "CompoundFrequency",
    "PercentageOperation",
    "TipResult",
    "PercentageResult",
    "YearlyBalance",
    "CompoundInterestResult",
    "AmortizationEntry",
    "LoanResult",
    "MortgageResult",
    "DiscountResult",
    "TipRequest",
    "PercentageRequest",
    "CompoundInterestRequest",
    "LoanRequest",
    "MortgageRequest",
    "DiscountRequest",
    # Health
    "BMICategory",
    "BMIIndicator",
    "Gender",
    "ActivityLevel",
    "WaterActivityLevel",
    "WeightRange",
    "BMIResult",
    "CalorieGoals",
    "MacroSplit",
    "CalorieResult",
    "WaterIntakeResult",
    "BMIRequest",
    "CalorieRequest",
    "WaterIntakeRequest",
    # Dates
    "AgeRequest",
    "AgeResult",
    # Education
    "LetterGrade",
    "GradeEntry",
    "GPARequest",
    "GPAResult",
    # Conversions
    "UnitCategory",
    "ConversionRequest",
    "ConversionResult",
    "ConversionCatalogResponse",
    # History
    "HistoryEntry",
    # AI provider options
    "TextCompletionOptions",
    "ImageSize",
    ]
