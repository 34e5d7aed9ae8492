"""
Health calculator endpoints (BMI, calories, water intake).

Mounted under /health-metrics so it does not collide with the /health
service check.
"""
from fastapi import APIRouter

from plainly.app.schemas.health import (
    BMIRequest,
    BMIResult,
    CalorieRequest,
    CalorieResult,
    WaterIntakeRequest,
    WaterIntakeResult,
    )
from plainly.app.utils.health_math import calculate_bmi, calculate_calories, calculate_water_intake

health_router = APIRouter(prefix="/health-metrics", tags=["Health"])


@health_router.post("/bmi", response_model=BMIResult)
async def bmi(request: BMIRequest):
    """
    Calculate BMI, its category and the healthy weight range.

    **Example Request**:
    ```json
    {"weight": 70, "height": 175, "unit": "metric"}
    ```
    """
    return calculate_bmi(request.weight, request.height, request.unit)


@health_router.post("/calories", response_model=CalorieResult)
async def calories(request: CalorieRequest):
    """Calculate BMR, TDEE, calorie goals and macro split."""
    return calculate_calories(
        request.weight,
        request.height,
        request.age,
        request.gender,
        request.activity_level,
        request.unit,
        )


@health_router.post("/water-intake", response_model=WaterIntakeResult)
async def water_intake(request: WaterIntakeRequest):
    """Recommend a daily water intake in ml, oz and 8 oz glasses."""
    return calculate_water_intake(request.weight, request.activity_level, request.unit)
