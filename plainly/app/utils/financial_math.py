"""
Financial mathematics utility functions.

Provides the money formulas behind the finance calculators: tip splitting,
percentage operations, compound interest, loan amortization, mortgages and
discounts.

All functions are pure (no side effects) and reusable.

Key concepts:
- Rate format: percentages as typed by users (5 means 5%)
- Every monetary output is rounded half away from zero to cents
- Intermediate values keep full Decimal precision; rounding happens only
  when a result record is built, so errors never compound across steps
- Degenerate input raises DivisionByZeroError / OutOfRangeError

Example:
    >>> calculate_loan(Decimal("10000"), Decimal("10"), 60).monthly_payment
    Decimal('212.47')
"""
from decimal import Decimal
from types import MappingProxyType
from typing import List

from plainly.app.schemas.finance import (
    AmortizationEntry,
    CompoundFrequency,
    CompoundInterestResult,
    DiscountResult,
    LoanResult,
    MortgageResult,
    PercentageOperation,
    PercentageResult,
    TipResult,
    YearlyBalance,
    )
from plainly.app.utils.decimal_utils import Number, round_decimal, to_decimal
from plainly.app.utils.validation_utils import (
    require_in_range,
    require_non_negative,
    require_non_zero,
    require_positive,
    require_whole_number,
    within_decimal_range,
    )

HUNDRED = Decimal("100")
MONTHS_PER_YEAR = 12
PMI_DOWN_PAYMENT_THRESHOLD = Decimal("0.2")
ZERO_MONEY = Decimal("0.00")


# ============================================================================
# TIP
# ============================================================================

@within_decimal_range
def calculate_tip(bill: Number, tip_pct: Number, people: Number = 1) -> TipResult:
    """
    Calculate the tip and split bill + tip between people.

    Args:
        bill: Bill amount before tip
        tip_pct: Tip percentage (18 means 18%)
        people: Number of people splitting (whole number >= 1)

    Returns:
        TipResult with every amount rounded to cents

    Raises:
        DivisionByZeroError: If people is 0
        OutOfRangeError: If any input is negative or people is fractional

    Example:
        >>> calculate_tip(Decimal("50"), Decimal("18"), 2)
        TipResult(tip_amount=Decimal('9.00'), total_amount=Decimal('59.00'),
                  tip_per_person=Decimal('4.50'), total_per_person=Decimal('29.50'))
    """
    bill = require_non_negative(to_decimal(bill, "bill"), "bill")
    tip_pct = require_non_negative(to_decimal(tip_pct, "tip_pct"), "tip_pct")
    people = require_non_zero(to_decimal(people, "people"), "people")
    require_non_negative(people, "people")
    require_whole_number(people, "people")

    tip_amount = bill * (tip_pct / HUNDRED)
    total_amount = bill + tip_amount

    return TipResult(
        tip_amount=round_decimal(tip_amount),
        total_amount=round_decimal(total_amount),
        tip_per_person=round_decimal(tip_amount / people),
        total_per_person=round_decimal(total_amount / people),
        )


# ============================================================================
# PERCENTAGES
# ============================================================================

def percent_of(percent: Number, number: Number) -> Decimal:
    """What is `percent`% of `number`?"""
    return round_decimal(to_decimal(percent, "percent") / HUNDRED * to_decimal(number, "number"))


def what_percent(x: Number, y: Number) -> Decimal:
    """
    `x` is what percent of `y`?

    Raises:
        DivisionByZeroError: If y is 0
    """
    y = require_non_zero(to_decimal(y, "y"), "y")
    return round_decimal(to_decimal(x, "x") / y * HUNDRED)


def percent_of_what(x: Number, percent: Number) -> Decimal:
    """
    `x` is `percent`% of what?

    Raises:
        DivisionByZeroError: If percent is 0
    """
    percent = require_non_zero(to_decimal(percent, "percent"), "percent")
    return round_decimal(to_decimal(x, "x") / (percent / HUNDRED))


def percent_change(from_value: Number, to_value: Number) -> Decimal:
    """
    Percentage change going from `from_value` to `to_value`.

    Raises:
        DivisionByZeroError: If from_value is 0
    """
    from_value = require_non_zero(to_decimal(from_value, "from_value"), "from_value")
    return round_decimal((to_decimal(to_value, "to_value") - from_value) / from_value * HUNDRED)


def increase_by(number: Number, percent: Number) -> Decimal:
    """Increase `number` by `percent`%."""
    return round_decimal(to_decimal(number, "number") * (1 + to_decimal(percent, "percent") / HUNDRED))


def decrease_by(number: Number, percent: Number) -> Decimal:
    """Decrease `number` by `percent`%."""
    return round_decimal(to_decimal(number, "number") * (1 - to_decimal(percent, "percent") / HUNDRED))


PERCENTAGE_OPERATIONS = MappingProxyType({
    PercentageOperation.PERCENT_OF: percent_of,
    PercentageOperation.WHAT_PERCENT: what_percent,
    PercentageOperation.PERCENT_OF_WHAT: percent_of_what,
    PercentageOperation.PERCENT_CHANGE: percent_change,
    PercentageOperation.INCREASE_BY: increase_by,
    PercentageOperation.DECREASE_BY: decrease_by,
    })


@within_decimal_range
def calculate_percentage(operation: PercentageOperation, a: Number, b: Number) -> PercentageResult:
    """
    Run one percentage operation with positional operands (a, b).

    The operand meaning follows the operation, e.g. PERCENT_OF computes
    a% of b and PERCENT_CHANGE computes the change from a to b.
    """
    operation = PercentageOperation(operation)
    a = to_decimal(a, "a")
    b = to_decimal(b, "b")
    return PercentageResult(operation=operation, a=a, b=b, result=PERCENTAGE_OPERATIONS[operation](a, b))


# ============================================================================
# COMPOUND INTEREST
# ============================================================================

def get_compounding_periods_per_year(frequency: CompoundFrequency) -> int:
    """
    Get the number of compounding periods per year for a given frequency.

    Args:
        frequency: Compounding frequency

    Returns:
        Number of compounding periods per year

    Raises:
        ValueError: If frequency is CONTINUOUS (handled separately)
    """
    if frequency == CompoundFrequency.DAILY:
        return 365
    elif frequency == CompoundFrequency.MONTHLY:
        return 12
    elif frequency == CompoundFrequency.QUARTERLY:
        return 4
    elif frequency == CompoundFrequency.SEMI_ANNUALLY:
        return 2
    elif frequency == CompoundFrequency.ANNUALLY:
        return 1
    elif frequency == CompoundFrequency.CONTINUOUS:
        raise ValueError("CONTINUOUS compounding should be handled separately")
    else:
        raise ValueError(f"Unsupported compound frequency: {frequency}")


def compound_growth_factor(annual_rate: Decimal, years: Decimal, frequency: CompoundFrequency) -> Decimal:
    """
    Growth factor A/P after `years` years.

    Formula (periodic compounding): (1 + r/n)^(n*t)
    Formula (continuous compounding): e^(r*t)

    Args:
        annual_rate: Annual rate as decimal (0.05 for 5%)
        years: Time in years
        frequency: Compounding frequency
    """
    if frequency == CompoundFrequency.CONTINUOUS:
        return (annual_rate * years).exp()
    n = Decimal(get_compounding_periods_per_year(frequency))
    return (1 + annual_rate / n) ** (n * years)


@within_decimal_range
def calculate_compound_interest(
    principal: Number,
    annual_rate_pct: Number,
    years: Number,
    frequency: CompoundFrequency = CompoundFrequency.ANNUALLY
    ) -> CompoundInterestResult:
    """
    Project a deposit under compound interest.

    Formula: A = P * (1 + r/n)^(n*t)

    Where:
        - P: Principal
        - r: Annual interest rate (annual_rate_pct / 100)
        - n: Number of compounding periods per year
        - t: Time in years
        - A: Final amount (principal + interest)

    The yearly breakdown evaluates the closed form independently for every
    whole year instead of accumulating year over year, so the balance of
    year k never carries the rounding of year k-1. Year 1's previous
    balance is the principal itself.

    Args:
        principal: Starting amount
        annual_rate_pct: Annual rate in percent
        years: Duration in years (fractions allowed, breakdown lists whole years)
        frequency: Compounding frequency

    Returns:
        CompoundInterestResult

    Raises:
        OutOfRangeError: If principal, rate or years is negative

    Example:
        >>> calculate_compound_interest(1000, 10, 1, CompoundFrequency.ANNUALLY).future_value
        Decimal('1100.00')
    """
    principal = require_non_negative(to_decimal(principal, "principal"), "principal")
    annual_rate = require_non_negative(to_decimal(annual_rate_pct, "annual_rate_pct"), "annual_rate_pct") / HUNDRED
    years = require_non_negative(to_decimal(years, "years"), "years")
    frequency = CompoundFrequency(frequency)

    future_value = principal * compound_growth_factor(annual_rate, years, frequency)
    effective_rate = (compound_growth_factor(annual_rate, Decimal(1), frequency) - 1) * HUNDRED

    yearly_breakdown = []
    for year in range(1, int(years) + 1):
        balance = principal * compound_growth_factor(annual_rate, Decimal(year), frequency)
        if year == 1:
            previous_balance = principal
        else:
            previous_balance = principal * compound_growth_factor(annual_rate, Decimal(year - 1), frequency)
        yearly_breakdown.append(YearlyBalance(
            year=year,
            balance=round_decimal(balance),
            interest=round_decimal(balance - previous_balance),
            ))

    return CompoundInterestResult(
        future_value=round_decimal(future_value),
        total_interest=round_decimal(future_value - principal),
        effective_rate=round_decimal(effective_rate),
        yearly_breakdown=yearly_breakdown,
        )


# ============================================================================
# LOANS & AMORTIZATION
# ============================================================================

def calculate_monthly_payment(principal: Decimal, monthly_rate: Decimal, term_months: int) -> Decimal:
    """
    Equated monthly installment, unrounded.

    Formula: M = P * r(1+r)^n / ((1+r)^n - 1)
    With r = 0 the loan is repaid in straight-line installments P / n. So is a
    rate too small to move 1 + r at Decimal precision (growth == 1).
    """
    if monthly_rate == 0:
        return principal / Decimal(term_months)
    growth = (1 + monthly_rate) ** term_months
    if growth == 1:
        return principal / Decimal(term_months)
    return principal * monthly_rate * growth / (growth - 1)


def build_amortization_schedule(
    principal: Decimal,
    monthly_rate: Decimal,
    term_months: int,
    monthly_payment: Decimal
    ) -> List[AmortizationEntry]:
    """
    Split every payment into interest and principal.

    The running balance keeps full precision; only the entries are rounded.
    The remaining balance is clamped at zero to absorb the last-month drift.
    """
    schedule = []
    balance = principal
    for month in range(1, term_months + 1):
        interest_portion = balance * monthly_rate
        principal_portion = monthly_payment - interest_portion
        balance -= principal_portion

        schedule.append(AmortizationEntry(
            month=month,
            payment=round_decimal(monthly_payment),
            principal_portion=round_decimal(principal_portion),
            interest_portion=round_decimal(interest_portion),
            remaining_balance=max(ZERO_MONEY, round_decimal(balance)),
            ))
    return schedule


@within_decimal_range
def calculate_loan(principal: Number, annual_rate_pct: Number, term_months: Number) -> LoanResult:
    """
    Calculate an amortized loan (EMI) and its full schedule.

    Args:
        principal: Amount borrowed
        annual_rate_pct: Annual rate in percent (monthly rate = rate / 100 / 12)
        term_months: Number of monthly payments (whole number >= 1)

    Returns:
        LoanResult with one AmortizationEntry per month

    Raises:
        OutOfRangeError: If principal or rate is negative, or term_months < 1

    Example:
        >>> calculate_loan(12000, 0, 12).monthly_payment
        Decimal('1000.00')
    """
    principal = require_non_negative(to_decimal(principal, "principal"), "principal")
    annual_rate = require_non_negative(to_decimal(annual_rate_pct, "annual_rate_pct"), "annual_rate_pct")
    term = to_decimal(term_months, "term_months")
    term_months = require_whole_number(require_positive(term, "term_months"), "term_months")

    monthly_rate = annual_rate / HUNDRED / MONTHS_PER_YEAR
    monthly_payment = calculate_monthly_payment(principal, monthly_rate, term_months)
    total_payment = monthly_payment * term_months

    return LoanResult(
        monthly_payment=round_decimal(monthly_payment),
        total_payment=round_decimal(total_payment),
        total_interest=round_decimal(total_payment - principal),
        amortization_schedule=build_amortization_schedule(principal, monthly_rate, term_months, monthly_payment),
        )


@within_decimal_range
def calculate_mortgage(
    home_price: Number,
    down_payment: Number,
    annual_rate_pct: Number,
    term_years: Number,
    annual_property_tax: Number = 0,
    annual_home_insurance: Number = 0,
    annual_pmi: Number = 0
    ) -> MortgageResult:
    """
    Calculate the monthly cost of a mortgage.

    Extends the loan calculation on the financed amount (price - down
    payment) with monthly property tax, home insurance and PMI. PMI is
    charged only when the down payment is below 20% of the home price.

    Args:
        home_price: Purchase price
        down_payment: Cash paid upfront (0 <= down_payment <= home_price)
        annual_rate_pct: Annual rate in percent
        term_years: Loan term in whole years
        annual_property_tax: Yearly property tax
        annual_home_insurance: Yearly home insurance premium
        annual_pmi: Yearly private mortgage insurance premium

    Returns:
        MortgageResult; total_payment includes escrow items, total_interest
        counts only the loan interest

    Raises:
        DivisionByZeroError: If home_price is 0
        OutOfRangeError: If an amount is negative, the down payment exceeds
            the price, or term_years < 1
    """
    home_price = require_non_negative(to_decimal(home_price, "home_price"), "home_price")
    require_non_zero(home_price, "home_price")
    down_payment = require_in_range(to_decimal(down_payment, "down_payment"), Decimal(0), home_price, "down_payment")
    annual_rate = require_non_negative(to_decimal(annual_rate_pct, "annual_rate_pct"), "annual_rate_pct")
    term = to_decimal(term_years, "term_years")
    term_years = require_whole_number(require_positive(term, "term_years"), "term_years")
    property_tax = require_non_negative(to_decimal(annual_property_tax, "annual_property_tax"), "annual_property_tax")
    insurance = require_non_negative(to_decimal(annual_home_insurance, "annual_home_insurance"), "annual_home_insurance")
    pmi = require_non_negative(to_decimal(annual_pmi, "annual_pmi"), "annual_pmi")

    loan_amount = home_price - down_payment
    monthly_rate = annual_rate / HUNDRED / MONTHS_PER_YEAR
    number_of_payments = term_years * MONTHS_PER_YEAR

    monthly_principal_interest = calculate_monthly_payment(loan_amount, monthly_rate, number_of_payments)
    monthly_tax = property_tax / MONTHS_PER_YEAR
    monthly_insurance = insurance / MONTHS_PER_YEAR
    pmi_required = down_payment / home_price < PMI_DOWN_PAYMENT_THRESHOLD
    monthly_pmi = pmi / MONTHS_PER_YEAR if pmi_required else Decimal(0)

    monthly_payment = monthly_principal_interest + monthly_tax + monthly_insurance + monthly_pmi
    total_payment = monthly_payment * number_of_payments
    total_interest = monthly_principal_interest * number_of_payments - loan_amount

    return MortgageResult(
        monthly_payment=round_decimal(monthly_payment),
        monthly_principal_interest=round_decimal(monthly_principal_interest),
        monthly_tax=round_decimal(monthly_tax),
        monthly_insurance=round_decimal(monthly_insurance),
        monthly_pmi=round_decimal(monthly_pmi),
        pmi_required=pmi_required,
        total_payment=round_decimal(total_payment),
        total_interest=round_decimal(total_interest),
        loan_amount=round_decimal(loan_amount),
        amortization_schedule=build_amortization_schedule(
            loan_amount, monthly_rate, number_of_payments, monthly_principal_interest
            ),
        )


# ============================================================================
# DISCOUNTS
# ============================================================================

@within_decimal_range
def calculate_discount(
    original_price: Number,
    discount_pct: Number,
    additional_discount_pct: Number = 0
    ) -> DiscountResult:
    """
    Calculate a sale price, optionally with a second stacked discount.

    The additional discount applies to the already discounted price, so
    20% + 10% saves 28%, not 30%.

    Raises:
        OutOfRangeError: If the price is negative or a percentage is outside [0, 100]
    """
    original_price = require_non_negative(to_decimal(original_price, "original_price"), "original_price")
    first_pct = require_in_range(to_decimal(discount_pct, "discount_pct"), Decimal(0), HUNDRED, "discount_pct")
    second_pct = require_in_range(
        to_decimal(additional_discount_pct, "additional_discount_pct"), Decimal(0), HUNDRED, "additional_discount_pct"
        )

    discount_amount = original_price * (first_pct / HUNDRED)
    price_after_first = original_price - discount_amount
    additional_discount_amount = price_after_first * (second_pct / HUNDRED)
    final_price = price_after_first - additional_discount_amount
    total_discount_percent = (1 - (1 - first_pct / HUNDRED) * (1 - second_pct / HUNDRED)) * HUNDRED

    return DiscountResult(
        discount_amount=round_decimal(discount_amount),
        price_after_first=round_decimal(price_after_first),
        additional_discount_amount=round_decimal(additional_discount_amount),
        final_price=round_decimal(final_price),
        savings=round_decimal(original_price - final_price),
        total_discount_percent=round_decimal(total_discount_percent),
        )
