"""
Date calculator endpoints.
"""
from fastapi import APIRouter

from plainly.app.schemas.dates import AgeRequest, AgeResult
from plainly.app.utils.date_math import calculate_age

dates_router = APIRouter(prefix="/dates", tags=["Dates"])


@dates_router.post("/age", response_model=AgeResult)
async def age(request: AgeRequest):
    """
    Calculate age at a target date (default: today) and the next birthday.

    **Example Request**:
    ```json
    {"birth_date": "2000-02-29", "target_date": "2021-03-01"}
    ```

    **Response**:
    ```json
    {
      "years": 21, "months": 0, "days": 0,
      "total_days": 7671, "total_weeks": 1095, "total_months": 252,
      "next_birthday": "2022-03-01", "days_until_birthday": 365
    }
    ```
    """
    return calculate_age(request.birth_date, request.target_date)
