"""
Test suite for compound interest projections.

Tests the closed form with every compounding frequency and the yearly
breakdown:
- Periodic compounding: A = P * (1 + r/n)^(n*t)
- Continuous compounding: A = P * e^(r*t)
- Effective annual rate: (1 + r/n)^n - 1 (or e^r - 1)

Where:
- P = Principal
- r = Annual rate (as decimal, e.g., 0.05 for 5%)
- t = Time in years
- n = Number of compounding periods per year
- A = Final amount (principal + interest)

Amounts are compared exactly after rounding to cents.
"""
from decimal import Decimal

import pytest

from plainly.app.schemas.finance import CompoundFrequency, YearlyBalance
from plainly.app.utils.financial_math import (
    calculate_compound_interest,
    compound_growth_factor,
    get_compounding_periods_per_year,
    )
from plainly.app.utils.validation_utils import OutOfRangeError


class TestCompoundingPeriods:
    """Test periods-per-year lookup."""

    @pytest.mark.parametrize("frequency,expected", [
        (CompoundFrequency.ANNUALLY, 1),
        (CompoundFrequency.SEMI_ANNUALLY, 2),
        (CompoundFrequency.QUARTERLY, 4),
        (CompoundFrequency.MONTHLY, 12),
        (CompoundFrequency.DAILY, 365),
        ])
    def test_periods(self, frequency, expected):
        result = get_compounding_periods_per_year(frequency)
        assert result == expected, f"Expected {expected}, got {result}"

    def test_continuous_has_no_periods(self):
        """CONTINUOUS is handled by e^(r*t), not by a period count."""
        with pytest.raises(ValueError):
            get_compounding_periods_per_year(CompoundFrequency.CONTINUOUS)


class TestCompoundInterest:
    """Test calculate_compound_interest per frequency."""

    def test_annual_one_year(self):
        """1,000 at 10% for 1 year, annual: 1,100."""
        result = calculate_compound_interest(1000, 10, 1, CompoundFrequency.ANNUALLY)
        assert result.future_value == Decimal("1100.00"), f"Expected 1100.00, got {result.future_value}"
        assert result.total_interest == Decimal("100.00")
        assert result.effective_rate == Decimal("10.00")
        assert result.yearly_breakdown == [YearlyBalance(year=1, balance=Decimal("1100.00"), interest=Decimal("100.00"))]

    def test_annual_three_years_breakdown(self):
        """1,000 at 10%: 1,100 / 1,210 / 1,331 with interest 100 / 110 / 121."""
        result = calculate_compound_interest(1000, 10, 3)
        assert result.future_value == Decimal("1331.00")
        assert result.total_interest == Decimal("331.00")

        balances = [entry.balance for entry in result.yearly_breakdown]
        interests = [entry.interest for entry in result.yearly_breakdown]
        assert [entry.year for entry in result.yearly_breakdown] == [1, 2, 3]
        assert balances == [Decimal("1100.00"), Decimal("1210.00"), Decimal("1331.00")]
        assert interests == [Decimal("100.00"), Decimal("110.00"), Decimal("121.00")]

    def test_semi_annual(self):
        """1,000 at 10% semi-annual: 1.05^2 = 1.1025."""
        result = calculate_compound_interest(1000, 10, 1, CompoundFrequency.SEMI_ANNUALLY)
        assert result.future_value == Decimal("1102.50")
        assert result.effective_rate == Decimal("10.25")

    def test_quarterly(self):
        """1,000 at 8% quarterly: 1.02^4 = 1.08243216."""
        result = calculate_compound_interest(1000, 8, 1, CompoundFrequency.QUARTERLY)
        assert result.future_value == Decimal("1082.43")
        assert result.effective_rate == Decimal("8.24")

    def test_monthly(self):
        """10,000 at 5% monthly: (1 + 0.05/12)^12 = 1.0511619..."""
        result = calculate_compound_interest(10000, 5, 1, CompoundFrequency.MONTHLY)
        assert result.future_value == Decimal("10511.62"), f"Expected 10511.62, got {result.future_value}"
        assert result.total_interest == Decimal("511.62")
        assert result.effective_rate == Decimal("5.12")

    def test_daily(self):
        """10,000 at 5% daily: (1 + 0.05/365)^365 = 1.0512674..."""
        result = calculate_compound_interest(10000, 5, 1, CompoundFrequency.DAILY)
        assert result.future_value == Decimal("10512.67")

    def test_continuous(self):
        """10,000 at 5% continuous: e^0.05 = 1.0512710..."""
        result = calculate_compound_interest(10000, 5, 1, CompoundFrequency.CONTINUOUS)
        assert result.future_value == Decimal("10512.71"), f"Expected 10512.71, got {result.future_value}"
        assert result.effective_rate == Decimal("5.13")

    def test_more_frequent_compounding_never_earns_less(self):
        """annual <= semi <= quarterly <= monthly <= daily <= continuous."""
        order = [
            CompoundFrequency.ANNUALLY,
            CompoundFrequency.SEMI_ANNUALLY,
            CompoundFrequency.QUARTERLY,
            CompoundFrequency.MONTHLY,
            CompoundFrequency.DAILY,
            CompoundFrequency.CONTINUOUS,
            ]
        values = [calculate_compound_interest(5000, 7, 10, f).future_value for f in order]
        assert values == sorted(values), f"Not monotonic: {values}"

    def test_fractional_years(self):
        """2.5 years: value uses t = 2.5, breakdown lists whole years only."""
        result = calculate_compound_interest(1000, 10, Decimal("2.5"))
        assert result.future_value == Decimal("1269.06"), f"Expected 1269.06, got {result.future_value}"
        assert len(result.yearly_breakdown) == 2

    def test_zero_years(self):
        """No time, no growth, empty breakdown."""
        result = calculate_compound_interest(1000, 10, 0)
        assert result.future_value == Decimal("1000.00")
        assert result.total_interest == Decimal("0.00")
        assert result.yearly_breakdown == []

    def test_zero_rate(self):
        result = calculate_compound_interest(2500, 0, 5, CompoundFrequency.MONTHLY)
        assert result.future_value == Decimal("2500.00")
        assert all(entry.interest == Decimal("0.00") for entry in result.yearly_breakdown)

    def test_breakdown_last_year_matches_future_value(self):
        """Each year uses the closed form, so the last balance is the projection."""
        result = calculate_compound_interest(12345, Decimal("3.7"), 12, CompoundFrequency.MONTHLY)
        assert result.yearly_breakdown[-1].balance == result.future_value

    @pytest.mark.parametrize("principal,rate,years", [(-1, 5, 1), (1000, -5, 1), (1000, 5, -1)])
    def test_negative_input(self, principal, rate, years):
        with pytest.raises(OutOfRangeError):
            calculate_compound_interest(principal, rate, years)

    @pytest.mark.parametrize("principal,rate,years,frequency", [
        (1000, 5, 20000, CompoundFrequency.ANNUALLY),
        (1000, 1000000, 1000000, CompoundFrequency.ANNUALLY),
        (1000, 100, 10000000, CompoundFrequency.CONTINUOUS),
        ])
    def test_growth_beyond_decimal_range(self, principal, rate, years, frequency):
        """Balances past the Decimal context (precision or exponent) are out of range."""
        with pytest.raises(OutOfRangeError):
            calculate_compound_interest(principal, rate, years, frequency)

    def test_growth_factor_is_one_at_time_zero(self):
        for frequency in CompoundFrequency:
            assert compound_growth_factor(Decimal("0.05"), Decimal(0), frequency) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
