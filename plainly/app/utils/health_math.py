"""
Health formulas: BMI, calorie needs (BMR/TDEE) and daily water intake.

All functions are pure and accept metric (kg, cm) or imperial (lb, in)
inputs. Imperial values are converted to metric before any formula runs.

References:
- BMI = weight_kg / height_m²; WHO adult categories
- BMR: Mifflin-St Jeor, 10*kg + 6.25*cm - 5*age + 5 (male) / -161 (female)
- TDEE = BMR * activity multiplier
- Water: 35 ml per kg of body weight, scaled by activity
"""
from decimal import Decimal
from types import MappingProxyType

from plainly.app.schemas.common import UnitSystem
from plainly.app.schemas.health import (
    ActivityLevel,
    BMICategory,
    BMIIndicator,
    BMIResult,
    CalorieGoals,
    CalorieResult,
    Gender,
    MacroSplit,
    WaterActivityLevel,
    WaterIntakeResult,
    WeightRange,
    )
from plainly.app.utils.decimal_utils import Number, round_decimal, to_decimal
from plainly.app.utils.validation_utils import require_positive, within_decimal_range

LB_TO_KG = Decimal("0.453592")
IN_TO_CM = Decimal("2.54")
ML_TO_OZ = Decimal("0.033814")
OZ_PER_GLASS = Decimal("8")

HEALTHY_BMI_MIN = Decimal("18.5")
HEALTHY_BMI_MAX = Decimal("24.9")

# (exclusive upper bound, category, indicator); the last row has no bound
BMI_CATEGORIES = (
    (Decimal("18.5"), BMICategory.UNDERWEIGHT, BMIIndicator.INFO),
    (Decimal("25"), BMICategory.NORMAL, BMIIndicator.SUCCESS),
    (Decimal("30"), BMICategory.OVERWEIGHT, BMIIndicator.WARNING),
    (None, BMICategory.OBESE, BMIIndicator.DANGER),
    )

ACTIVITY_MULTIPLIERS = MappingProxyType({
    ActivityLevel.SEDENTARY: Decimal("1.2"),
    ActivityLevel.LIGHT: Decimal("1.375"),
    ActivityLevel.MODERATE: Decimal("1.55"),
    ActivityLevel.ACTIVE: Decimal("1.725"),
    ActivityLevel.VERY_ACTIVE: Decimal("1.9"),
    })

WATER_ACTIVITY_MULTIPLIERS = MappingProxyType({
    WaterActivityLevel.SEDENTARY: Decimal("1.0"),
    WaterActivityLevel.MODERATE: Decimal("1.2"),
    WaterActivityLevel.ACTIVE: Decimal("1.4"),
    WaterActivityLevel.VERY_ACTIVE: Decimal("1.6"),
    })

BMR_GENDER_OFFSET = MappingProxyType({
    Gender.MALE: Decimal("5"),
    Gender.FEMALE: Decimal("-161"),
    })

CALORIE_GOAL_DELTA = Decimal("500")
WATER_ML_PER_KG = Decimal("35")

# Share of maintenance calories and kcal per gram
PROTEIN_SHARE, PROTEIN_KCAL_PER_G = Decimal("0.3"), Decimal("4")
CARBS_SHARE, CARBS_KCAL_PER_G = Decimal("0.4"), Decimal("4")
FAT_SHARE, FAT_KCAL_PER_G = Decimal("0.3"), Decimal("9")


def _round_whole(value: Decimal) -> int:
    return int(round_decimal(value, 0))


def _weight_in_kg(weight: Decimal, unit: UnitSystem) -> Decimal:
    return weight * LB_TO_KG if unit == UnitSystem.IMPERIAL else weight


def _height_in_cm(height: Decimal, unit: UnitSystem) -> Decimal:
    return height * IN_TO_CM if unit == UnitSystem.IMPERIAL else height


def classify_bmi(bmi: Decimal) -> tuple[BMICategory, BMIIndicator]:
    """Map a BMI value to its category and indicator."""
    for upper_bound, category, indicator in BMI_CATEGORIES:
        if upper_bound is None or bmi < upper_bound:
            return category, indicator
    raise AssertionError("BMI_CATEGORIES must end with an unbounded row")


@within_decimal_range
def calculate_bmi(weight: Number, height: Number, unit: UnitSystem = UnitSystem.METRIC) -> BMIResult:
    """
    Calculate Body Mass Index and the healthy weight range for the height.

    The category is taken from the BMI rounded to 1 decimal, so 24.96
    reports 25.0 and "Overweight". The healthy range inverts BMI bounds
    18.5 and 24.9 against the height and is expressed in the same weight
    unit as the input.

    Args:
        weight: kg (metric) or lb (imperial)
        height: cm (metric) or in (imperial)
        unit: Unit system of weight and height

    Raises:
        OutOfRangeError: If weight or height is not positive

    Example:
        >>> result = calculate_bmi(70, 175, UnitSystem.METRIC)
        >>> result.bmi, result.category
        (Decimal('22.9'), <BMICategory.NORMAL: 'Normal weight'>)
    """
    unit = UnitSystem(unit)
    weight = require_positive(to_decimal(weight, "weight"), "weight")
    height = require_positive(to_decimal(height, "height"), "height")

    height_m = _height_in_cm(height, unit) / 100
    height_m_squared = height_m * height_m
    bmi = round_decimal(_weight_in_kg(weight, unit) / height_m_squared, 1)
    category, indicator = classify_bmi(bmi)

    min_weight = HEALTHY_BMI_MIN * height_m_squared
    max_weight = HEALTHY_BMI_MAX * height_m_squared
    if unit == UnitSystem.IMPERIAL:
        min_weight, max_weight = min_weight / LB_TO_KG, max_weight / LB_TO_KG

    return BMIResult(
        bmi=bmi,
        category=category,
        healthy_weight_range=WeightRange(min=round_decimal(min_weight, 1), max=round_decimal(max_weight, 1)),
        indicator=indicator,
        )


def calculate_bmr(weight_kg: Decimal, height_cm: Decimal, age: Decimal, gender: Gender) -> Decimal:
    """Mifflin-St Jeor basal metabolic rate in kcal/day, unrounded."""
    return 10 * weight_kg + Decimal("6.25") * height_cm - 5 * age + BMR_GENDER_OFFSET[gender]


@within_decimal_range
def calculate_calories(
    weight: Number,
    height: Number,
    age: Number,
    gender: Gender,
    activity_level: ActivityLevel,
    unit: UnitSystem = UnitSystem.METRIC
    ) -> CalorieResult:
    """
    Calculate BMR, TDEE, calorie goals and a maintenance macro split.

    Goals are TDEE -500 / +0 / +500 kcal. Macros split the rounded
    maintenance calories 30% protein, 40% carbs, 30% fat at 4/4/9 kcal per
    gram. All outputs are whole numbers.

    Raises:
        OutOfRangeError: If weight, height or age is not positive
    """
    unit = UnitSystem(unit)
    gender = Gender(gender)
    activity_level = ActivityLevel(activity_level)
    weight = require_positive(to_decimal(weight, "weight"), "weight")
    height = require_positive(to_decimal(height, "height"), "height")
    age = require_positive(to_decimal(age, "age"), "age")

    bmr = calculate_bmr(_weight_in_kg(weight, unit), _height_in_cm(height, unit), age, gender)
    tdee = bmr * ACTIVITY_MULTIPLIERS[activity_level]

    goals = CalorieGoals(
        lose=_round_whole(tdee - CALORIE_GOAL_DELTA),
        maintain=_round_whole(tdee),
        gain=_round_whole(tdee + CALORIE_GOAL_DELTA),
        )
    maintenance = Decimal(goals.maintain)
    macros = MacroSplit(
        protein=_round_whole(maintenance * PROTEIN_SHARE / PROTEIN_KCAL_PER_G),
        carbs=_round_whole(maintenance * CARBS_SHARE / CARBS_KCAL_PER_G),
        fat=_round_whole(maintenance * FAT_SHARE / FAT_KCAL_PER_G),
        )

    return CalorieResult(bmr=_round_whole(bmr), tdee=_round_whole(tdee), goals=goals, macros=macros)


@within_decimal_range
def calculate_water_intake(
    weight: Number,
    activity_level: WaterActivityLevel = WaterActivityLevel.SEDENTARY,
    unit: UnitSystem = UnitSystem.METRIC
    ) -> WaterIntakeResult:
    """
    Recommend a daily water intake.

    35 ml per kg, times the activity multiplier, rounded to whole ml. Ounces
    are derived from the rounded millilitres and glasses (8 oz) from the
    rounded ounces, each rounded to the nearest whole number.

    Raises:
        OutOfRangeError: If weight is not positive

    Example:
        >>> calculate_water_intake(70, WaterActivityLevel.SEDENTARY)
        WaterIntakeResult(daily_intake_ml=2450, daily_intake_oz=83, glasses=10)
    """
    unit = UnitSystem(unit)
    activity_level = WaterActivityLevel(activity_level)
    weight = require_positive(to_decimal(weight, "weight"), "weight")

    daily_intake_ml = _round_whole(
        _weight_in_kg(weight, unit) * WATER_ML_PER_KG * WATER_ACTIVITY_MULTIPLIERS[activity_level]
        )
    daily_intake_oz = _round_whole(daily_intake_ml * ML_TO_OZ)
    glasses = _round_whole(daily_intake_oz / OZ_PER_GLASS)

    return WaterIntakeResult(daily_intake_ml=daily_intake_ml, daily_intake_oz=daily_intake_oz, glasses=glasses)
