"""
Every formula is a pure function: the same input gives an equal result.
"""
import pytest

from plainly.app.schemas.common import UnitSystem
from plainly.app.schemas.finance import CompoundFrequency, PercentageOperation
from plainly.app.schemas.health import ActivityLevel, Gender, WaterActivityLevel
from plainly.app.utils.date_math import calculate_age
from plainly.app.utils.financial_math import (
    calculate_compound_interest,
    calculate_discount,
    calculate_loan,
    calculate_mortgage,
    calculate_percentage,
    calculate_tip,
    )
from plainly.app.utils.grade_utils import calculate_gpa
from plainly.app.utils.health_math import calculate_bmi, calculate_calories, calculate_water_intake
from plainly.app.utils.unit_conversion import convert_units

CALLS = [
    (calculate_tip, ("87.35", 15, 3)),
    (calculate_percentage, (PercentageOperation.PERCENT_CHANGE, 80, 92)),
    (calculate_compound_interest, (2500, "4.2", 7, CompoundFrequency.DAILY)),
    (calculate_loan, (18000, "6.9", 48)),
    (calculate_mortgage, (350000, 35000, "5.75", 25, 4200, 1500, 1800)),
    (calculate_discount, ("129.99", 25, 10)),
    (calculate_bmi, (180, 70, UnitSystem.IMPERIAL)),
    (calculate_calories, (65, 170, 41, Gender.FEMALE, ActivityLevel.LIGHT)),
    (calculate_water_intake, (82, WaterActivityLevel.VERY_ACTIVE)),
    (calculate_age, ("1985-07-31", "2026-10-19")),
    (calculate_gpa, ([{"grade": "A-", "credits": 4}, {"grade": "C+", "credits": 2}],)),
    (convert_units, ("volume", "gal_to_l", "3.5")),
    ]


@pytest.mark.parametrize("formula,args", CALLS, ids=[formula.__name__ for formula, _ in CALLS])
def test_same_input_same_result(formula, args):
    first = formula(*args)
    second = formula(*args)
    assert first == second, f"{formula.__name__} is not deterministic"
    assert first.model_dump() == second.model_dump()
