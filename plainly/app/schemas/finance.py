"""
Finance calculator schemas.

Result records and request bodies for the finance formulas in
plainly.app.utils.financial_math.

**Domain Coverage**:
- Tip splitting: TipResult
- Percentage operations: PercentageOperation, PercentageResult
- Compound interest: CompoundFrequency, YearlyBalance, CompoundInterestResult
- Loans: AmortizationEntry, LoanResult
- Mortgages: MortgageResult
- Discounts: DiscountResult

**Design Notes**:
- Monetary fields are Decimal rounded to 2 decimals by the formulas
- Rates are percentages (5 means 5%), matching what users type in
- Enums for frequencies and percentage operations, so dispatch is exhaustive
"""
# Postpones evaluation of type hints to improve imports and performance. Also avoid circular import issues.
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import Field

from plainly.app.schemas.common import CalculatorResult, CalculatorRequest


# ============================================================================
# ENUMS
# ============================================================================

class CompoundFrequency(str, Enum):
    """
    Frequency of interest compounding.

    - ANNUALLY: n=1
    - SEMI_ANNUALLY: n=2
    - QUARTERLY: n=4
    - MONTHLY: n=12
    - DAILY: n=365
    - CONTINUOUS: A = P * e^(rt)
    """
    ANNUALLY = "annually"
    SEMI_ANNUALLY = "semi-annually"
    QUARTERLY = "quarterly"
    MONTHLY = "monthly"
    DAILY = "daily"
    CONTINUOUS = "continuous"


class PercentageOperation(str, Enum):
    """
    Operations of the percentage calculator.

    - PERCENT_OF: What is A% of B?
    - WHAT_PERCENT: A is what % of B?
    - PERCENT_OF_WHAT: A is B% of what?
    - PERCENT_CHANGE: % change from A to B
    - INCREASE_BY: Increase A by B%
    - DECREASE_BY: Decrease A by B%
    """
    PERCENT_OF = "percent-of"
    WHAT_PERCENT = "what-percent"
    PERCENT_OF_WHAT = "percent-of-what"
    PERCENT_CHANGE = "percent-change"
    INCREASE_BY = "increase-by"
    DECREASE_BY = "decrease-by"


# ============================================================================
# RESULTS
# ============================================================================

class TipResult(CalculatorResult):
    """Tip and bill split, every amount rounded to cents."""
    tip_amount: Decimal
    total_amount: Decimal
    tip_per_person: Decimal
    total_per_person: Decimal


class PercentageResult(CalculatorResult):
    operation: PercentageOperation
    a: Decimal
    b: Decimal
    result: Decimal


class YearlyBalance(CalculatorResult):
    """
    Balance at the end of a year of compounding.

    Attributes:
        year: Year number, starting at 1
        balance: Closed-form balance at the end of the year
        interest: Interest earned during that year only
    """
    year: int
    balance: Decimal
    interest: Decimal


class CompoundInterestResult(CalculatorResult):
    """
    Compound interest projection.

    Attributes:
        future_value: A = P(1 + r/n)^(nt)
        total_interest: A - P
        effective_rate: Effective annual rate in percent ((1 + r/n)^n - 1) * 100
        yearly_breakdown: One entry per whole year
    """
    future_value: Decimal
    total_interest: Decimal
    effective_rate: Decimal
    yearly_breakdown: List[YearlyBalance]


class AmortizationEntry(CalculatorResult):
    """
    One month of an amortization schedule.

    Example:
        {
            "month": 1,
            "payment": "212.47",
            "principal_portion": "129.14",
            "interest_portion": "83.33",
            "remaining_balance": "9870.86"
        }
    """
    month: int
    payment: Decimal
    principal_portion: Decimal
    interest_portion: Decimal
    remaining_balance: Decimal


class LoanResult(CalculatorResult):
    monthly_payment: Decimal
    total_payment: Decimal
    total_interest: Decimal
    amortization_schedule: List[AmortizationEntry]


class MortgageResult(CalculatorResult):
    """
    Mortgage payment breakdown.

    monthly_payment aggregates principal + interest + tax + insurance + PMI.
    total_interest counts only the interest on the financed amount.
    """
    monthly_payment: Decimal
    monthly_principal_interest: Decimal
    monthly_tax: Decimal
    monthly_insurance: Decimal
    monthly_pmi: Decimal
    pmi_required: bool
    total_payment: Decimal
    total_interest: Decimal
    loan_amount: Decimal
    amortization_schedule: List[AmortizationEntry]


class DiscountResult(CalculatorResult):
    """
    Sale price after a discount, optionally stacked with a second one.

    savings equals discount_amount when no additional discount is given.
    """
    discount_amount: Decimal
    price_after_first: Decimal
    additional_discount_amount: Decimal
    final_price: Decimal
    savings: Decimal
    total_discount_percent: Decimal


# ============================================================================
# REQUESTS
# ============================================================================

class TipRequest(CalculatorRequest):
    bill: Decimal = Field(..., description="Bill amount before tip")
    tip_pct: Decimal = Field(..., description="Tip percentage (18 = 18%)")
    people: int = Field(1, description="Number of people splitting the bill")


class PercentageRequest(CalculatorRequest):
    a: Decimal = Field(..., description="First operand (see operation)")
    b: Decimal = Field(..., description="Second operand (see operation)")


class CompoundInterestRequest(CalculatorRequest):
    principal: Decimal
    annual_rate_pct: Decimal = Field(..., description="Annual rate in percent")
    years: Decimal
    frequency: CompoundFrequency = CompoundFrequency.ANNUALLY


class LoanRequest(CalculatorRequest):
    principal: Decimal
    annual_rate_pct: Decimal = Field(..., description="Annual rate in percent")
    term_months: int


class MortgageRequest(CalculatorRequest):
    home_price: Decimal
    down_payment: Decimal
    annual_rate_pct: Decimal = Field(..., description="Annual rate in percent")
    term_years: int
    annual_property_tax: Decimal = Decimal("0")
    annual_home_insurance: Decimal = Decimal("0")
    annual_pmi: Decimal = Field(Decimal("0"), description="Annual PMI, charged only below 20% down")


class DiscountRequest(CalculatorRequest):
    original_price: Decimal
    discount_pct: Decimal
    additional_discount_pct: Decimal = Decimal("0")
