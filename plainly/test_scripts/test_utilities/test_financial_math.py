"""
Test everyday finance formulas: tip split, percentages, discounts, mortgages.

Every expected value is worked out by hand from the formula in the test
docstring; amounts are compared exactly after rounding to cents.
"""
from decimal import Decimal

import pytest

from plainly.app.schemas.finance import PercentageOperation, PercentageResult
from plainly.app.utils.financial_math import (
    PERCENTAGE_OPERATIONS,
    calculate_discount,
    calculate_mortgage,
    calculate_percentage,
    calculate_tip,
    decrease_by,
    increase_by,
    percent_change,
    percent_of,
    percent_of_what,
    what_percent,
    )
from plainly.app.utils.validation_utils import DivisionByZeroError, OutOfRangeError


# ============================================================================
# TIP
# ============================================================================

class TestTip:
    """Tip = bill * pct / 100, split evenly between people."""

    def test_bill_50_tip_18_two_people(self):
        """50 at 18% for 2: tip 9.00, total 59.00, 4.50 / 29.50 each."""
        result = calculate_tip(Decimal("50"), Decimal("18"), 2)
        assert result.tip_amount == Decimal("9.00"), f"Expected 9.00, got {result.tip_amount}"
        assert result.total_amount == Decimal("59.00")
        assert result.tip_per_person == Decimal("4.50")
        assert result.total_per_person == Decimal("29.50")

    def test_split_rounds_per_person_to_cents(self):
        """115 / 3 = 38.333... -> 38.33."""
        result = calculate_tip(100, 15, 3)
        assert result.tip_amount == Decimal("15.00")
        assert result.total_amount == Decimal("115.00")
        assert result.tip_per_person == Decimal("5.00")
        assert result.total_per_person == Decimal("38.33"), f"Expected 38.33, got {result.total_per_person}"

    def test_default_single_person(self):
        """Without people, the whole bill goes to one person."""
        result = calculate_tip(80, 20)
        assert result.tip_per_person == result.tip_amount == Decimal("16.00")
        assert result.total_per_person == result.total_amount == Decimal("96.00")

    def test_zero_tip(self):
        result = calculate_tip(42, 0, 2)
        assert result.tip_amount == Decimal("0.00")
        assert result.total_per_person == Decimal("21.00")

    def test_zero_people_is_division_by_zero(self):
        """Splitting 0 ways is rejected, never reported as 0 or Infinity."""
        with pytest.raises(DivisionByZeroError) as exc_info:
            calculate_tip(50, 18, 0)
        assert exc_info.value.field == "people"

    @pytest.mark.parametrize("bill,pct,people", [(-1, 18, 2), (50, -5, 2), (50, 18, -2), (50, 18, Decimal("1.5"))])
    def test_invalid_input_is_out_of_range(self, bill, pct, people):
        with pytest.raises(OutOfRangeError):
            calculate_tip(bill, pct, people)

    def test_bill_beyond_decimal_precision_is_out_of_range(self):
        """1E+27 cannot be rounded to cents at 28 significant digits."""
        with pytest.raises(OutOfRangeError):
            calculate_tip("1e27", 10)

    def test_idempotent(self):
        """Same input, same result record."""
        assert calculate_tip(73, 12.5, 4) == calculate_tip(73, 12.5, 4)


# ============================================================================
# PERCENTAGES
# ============================================================================

class TestPercentages:
    """The six percentage operations, each rounded to 2 decimals."""

    def test_percent_of(self):
        """20% of 150 = 30."""
        assert percent_of(20, 150) == Decimal("30.00")

    def test_what_percent(self):
        """30 is 20% of 150; 1 is 33.33% of 3."""
        assert what_percent(30, 150) == Decimal("20.00")
        assert what_percent(1, 3) == Decimal("33.33")

    def test_percent_of_what(self):
        """30 is 20% of 150."""
        assert percent_of_what(30, 20) == Decimal("150.00")

    def test_percent_change(self):
        """100 -> 125 is +25%, 200 -> 150 is -25%, 3 -> 1 is -66.67%."""
        assert percent_change(100, 125) == Decimal("25.00")
        assert percent_change(200, 150) == Decimal("-25.00")
        assert percent_change(3, 1) == Decimal("-66.67")

    def test_increase_and_decrease_by(self):
        """200 +15% = 230, 200 -15% = 170."""
        assert increase_by(200, 15) == Decimal("230.00")
        assert decrease_by(200, 15) == Decimal("170.00")

    @pytest.mark.parametrize("func,a,b", [
        (what_percent, 5, 0),
        (percent_of_what, 5, 0),
        (percent_change, 0, 5),
        ])
    def test_zero_denominator(self, func, a, b):
        """Degenerate denominators raise instead of returning 0."""
        with pytest.raises(DivisionByZeroError):
            func(a, b)

    def test_dispatch_covers_every_operation(self):
        """Each PercentageOperation has a formula."""
        assert set(PERCENTAGE_OPERATIONS) == set(PercentageOperation)

    def test_calculate_percentage_record(self):
        result = calculate_percentage(PercentageOperation.PERCENT_OF, 20, 150)
        assert isinstance(result, PercentageResult)
        assert result.operation == PercentageOperation.PERCENT_OF
        assert result.a == Decimal("20") and result.b == Decimal("150")
        assert result.result == Decimal("30.00")

    def test_calculate_percentage_accepts_operation_value(self):
        result = calculate_percentage("percent-change", 100, 125)
        assert result.result == Decimal("25.00")


# ============================================================================
# DISCOUNT
# ============================================================================

class TestDiscount:
    """Stacked discounts apply to the already discounted price."""

    def test_single_discount(self):
        """100 at 20% off = 80."""
        result = calculate_discount(100, 20)
        assert result.discount_amount == Decimal("20.00")
        assert result.price_after_first == Decimal("80.00")
        assert result.additional_discount_amount == Decimal("0.00")
        assert result.final_price == Decimal("80.00")
        assert result.savings == Decimal("20.00")
        assert result.total_discount_percent == Decimal("20.00")

    def test_stacked_discount_saves_28_not_30(self):
        """100, 20% then 10%: 80 then 72, total 28%."""
        result = calculate_discount(100, 20, 10)
        assert result.price_after_first == Decimal("80.00")
        assert result.additional_discount_amount == Decimal("8.00")
        assert result.final_price == Decimal("72.00")
        assert result.savings == Decimal("28.00")
        assert result.total_discount_percent == Decimal("28.00"), \
            f"Expected 28.00, got {result.total_discount_percent}"

    def test_full_discount(self):
        result = calculate_discount(59.99, 100)
        assert result.final_price == Decimal("0.00")
        assert result.savings == Decimal("59.99")

    @pytest.mark.parametrize("price,pct,extra", [(-10, 10, 0), (100, 101, 0), (100, -1, 0), (100, 10, 150)])
    def test_out_of_range(self, price, pct, extra):
        with pytest.raises(OutOfRangeError):
            calculate_discount(price, pct, extra)


# ============================================================================
# MORTGAGE
# ============================================================================

class TestMortgage:
    """Loan payment on (price - down payment) plus escrow items and PMI."""

    def test_twenty_percent_down_no_pmi(self):
        """300k, 60k down, 6.5% over 30 years: P&I 1516.96, escrow 400."""
        result = calculate_mortgage(
            300000, 60000, Decimal("6.5"), 30,
            annual_property_tax=3600, annual_home_insurance=1200, annual_pmi=1000
            )
        assert result.loan_amount == Decimal("240000.00")
        assert result.pmi_required is False
        assert result.monthly_pmi == Decimal("0.00")
        assert result.monthly_tax == Decimal("300.00")
        assert result.monthly_insurance == Decimal("100.00")
        assert result.monthly_principal_interest == Decimal("1516.96"), \
            f"Expected 1516.96, got {result.monthly_principal_interest}"
        assert result.monthly_payment == Decimal("1916.96")
        assert len(result.amortization_schedule) == 360

    def test_low_down_payment_adds_pmi(self):
        """Below 20% down, PMI is charged monthly."""
        result = calculate_mortgage(200000, 10000, 5, 30, annual_pmi=1200)
        assert result.pmi_required is True
        assert result.monthly_pmi == Decimal("100.00")
        assert result.monthly_payment == result.monthly_principal_interest + Decimal("100.00")

    def test_pmi_threshold_is_exclusive(self):
        """Exactly 20% down needs no PMI, just below does."""
        assert calculate_mortgage(100000, 20000, 5, 15, annual_pmi=600).pmi_required is False
        assert calculate_mortgage(100000, 19999, 5, 15, annual_pmi=600).pmi_required is True

    def test_zero_rate_mortgage(self):
        """120k at 0% over 10 years: 1000 a month, no interest."""
        result = calculate_mortgage(120000, 0, 0, 10)
        assert result.monthly_principal_interest == Decimal("1000.00")
        assert result.total_interest == Decimal("0.00")
        assert result.total_payment == Decimal("120000.00")
        assert result.amortization_schedule[-1].remaining_balance == Decimal("0.00")

    def test_total_interest_excludes_escrow(self):
        """Tax and insurance raise total_payment but not total_interest."""
        bare = calculate_mortgage(250000, 50000, 4, 20)
        with_escrow = calculate_mortgage(250000, 50000, 4, 20, annual_property_tax=2400, annual_home_insurance=1200)
        assert bare.total_interest == with_escrow.total_interest
        assert with_escrow.total_payment > bare.total_payment

    def test_zero_home_price(self):
        with pytest.raises(DivisionByZeroError):
            calculate_mortgage(0, 0, 5, 30)

    @pytest.mark.parametrize("price,down,rate,years", [
        (100000, 150000, 5, 30),
        (100000, -1, 5, 30),
        (100000, 20000, -5, 30),
        (100000, 20000, 5, 0),
        (100000, 20000, 5, Decimal("12.5")),
        ])
    def test_out_of_range(self, price, down, rate, years):
        with pytest.raises(OutOfRangeError):
            calculate_mortgage(price, down, rate, years)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
