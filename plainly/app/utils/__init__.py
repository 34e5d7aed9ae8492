"""
Calculation engine of Plainly.

This package contains:
- decimal_utils: Decimal conversion and half-away-from-zero rounding
- validation_utils: Error kinds (DivisionByZeroError, OutOfRangeError) and input guards
- financial_math: Tip, percentages, compound interest, loans, mortgages, discounts
- health_math: BMI, calorie needs, water intake
- date_math: Calendar age and next birthday
- datetime_utils: UTC clock and ISO date parsing
- grade_utils: GPA
- unit_conversion: Fixed linear conversion table
- random_utils: Random number picker
"""
