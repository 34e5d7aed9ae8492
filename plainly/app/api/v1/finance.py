"""
Finance calculator endpoints.

Thin wrappers around plainly.app.utils.financial_math: every endpoint
validates the body with its request schema, calls one formula and returns
the result record. Rejected input (CalculationError) is turned into a 400
response by the application-level handler.
"""
from decimal import Decimal

from fastapi import APIRouter, HTTPException

from plainly.app.config import get_settings
from plainly.app.logging_config import get_logger
from plainly.app.schemas.finance import (
    CompoundInterestRequest,
    CompoundInterestResult,
    DiscountRequest,
    DiscountResult,
    LoanRequest,
    LoanResult,
    MortgageRequest,
    MortgageResult,
    PercentageOperation,
    PercentageRequest,
    PercentageResult,
    TipRequest,
    TipResult,
    )
from plainly.app.utils.financial_math import (
    calculate_compound_interest,
    calculate_discount,
    calculate_loan,
    calculate_mortgage,
    calculate_percentage,
    calculate_tip,
    )

logger = get_logger(__name__)
finance_router = APIRouter(prefix="/finance", tags=["Finance"])


def _check_schedule_length(term_months: int) -> None:
    """Refuse schedules longer than MAX_SCHEDULE_MONTHS."""
    max_months = get_settings().MAX_SCHEDULE_MONTHS
    if term_months > max_months:
        raise HTTPException(
            status_code=400,
            detail=f"Term of {term_months} months exceeds the maximum of {max_months} months"
            )


def _check_breakdown_length(years: Decimal) -> None:
    """Refuse projections whose yearly breakdown exceeds MAX_BREAKDOWN_YEARS rows."""
    max_years = get_settings().MAX_BREAKDOWN_YEARS
    if years > max_years:
        raise HTTPException(
            status_code=400,
            detail=f"Duration of {years} years exceeds the maximum of {max_years} years"
            )


@finance_router.post("/tip", response_model=TipResult)
async def tip(request: TipRequest):
    """
    Calculate tip and per-person split.

    **Example Request**:
    ```json
    {"bill": 50, "tip_pct": 18, "people": 2}
    ```

    **Response**:
    ```json
    {"tip_amount": "9.00", "total_amount": "59.00", "tip_per_person": "4.50", "total_per_person": "29.50"}
    ```
    """
    return calculate_tip(request.bill, request.tip_pct, request.people)


@finance_router.post("/percentage/{operation}", response_model=PercentageResult)
async def percentage(operation: PercentageOperation, request: PercentageRequest):
    """
    Run a percentage operation on operands a and b.

    Operations: percent-of (a% of b), what-percent (a is what % of b),
    percent-of-what (a is b% of what), percent-change (from a to b),
    increase-by (a + b%), decrease-by (a - b%).
    """
    return calculate_percentage(operation, request.a, request.b)


@finance_router.post("/compound-interest", response_model=CompoundInterestResult)
async def compound_interest(request: CompoundInterestRequest):
    """
    Project a deposit under compound interest, with a yearly breakdown.

    At most MAX_BREAKDOWN_YEARS years are projected per request.
    """
    _check_breakdown_length(request.years)
    return calculate_compound_interest(
        request.principal,
        request.annual_rate_pct,
        request.years,
        request.frequency,
        )


@finance_router.post("/loan", response_model=LoanResult)
async def loan(request: LoanRequest):
    """Calculate the monthly installment and full amortization schedule of a loan."""
    _check_schedule_length(request.term_months)
    result = calculate_loan(request.principal, request.annual_rate_pct, request.term_months)
    logger.debug("Loan calculated", term_months=request.term_months, monthly_payment=result.monthly_payment)
    return result


@finance_router.post("/mortgage", response_model=MortgageResult)
async def mortgage(request: MortgageRequest):
    """Calculate the monthly mortgage cost including tax, insurance and PMI."""
    _check_schedule_length(request.term_years * 12)
    return calculate_mortgage(
        request.home_price,
        request.down_payment,
        request.annual_rate_pct,
        request.term_years,
        annual_property_tax=request.annual_property_tax,
        annual_home_insurance=request.annual_home_insurance,
        annual_pmi=request.annual_pmi,
        )


@finance_router.post("/discount", response_model=DiscountResult)
async def discount(request: DiscountRequest):
    """Calculate the sale price after one or two stacked discounts."""
    return calculate_discount(request.original_price, request.discount_pct, request.additional_discount_pct)
