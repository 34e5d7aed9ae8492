"""
Utility calculator endpoints.

Provides endpoints for:
- GPA calculation
- Unit conversion (and the list of available conversions)
- Random number picking
"""
import random

from fastapi import APIRouter, HTTPException

from plainly.app.config import get_settings
from plainly.app.schemas.conversions import ConversionCatalogResponse, ConversionRequest, ConversionResult
from plainly.app.schemas.education import GPARequest, GPAResult
from plainly.app.schemas.utilities import RandomNumbersRequest, RandomNumbersResponse
from plainly.app.utils.grade_utils import calculate_gpa
from plainly.app.utils.random_utils import generate_random_numbers
from plainly.app.utils.unit_conversion import convert_units, list_conversions

router = APIRouter(prefix="/utilities", tags=["Utilities"])


@router.post("/gpa", response_model=GPAResult)
async def gpa(request: GPARequest):
    """
    Calculate a credit-weighted GPA.

    **Example Request**:
    ```json
    {"grades": [{"grade": "A", "credits": 3}, {"grade": "B+", "credits": 3}]}
    ```

    **Response**:
    ```json
    {"gpa": "3.65", "total_credits": "6", "total_points": "21.90"}
    ```
    """
    return calculate_gpa(request.grades)


@router.get("/conversions", response_model=ConversionCatalogResponse)
async def list_unit_conversions():
    """
    List the conversion ids available per category.

    **Response**:
    ```json
    {
      "conversions": {
        "length": ["m_to_ft", "ft_to_m", "km_to_mi", "mi_to_km", "cm_to_in", "in_to_cm"],
        "weight": ["kg_to_lb", "lb_to_kg", "g_to_oz", "oz_to_g"],
        "temperature": ["c_to_f", "f_to_c", "c_to_k", "k_to_c"],
        "volume": ["l_to_gal", "gal_to_l", "ml_to_oz", "oz_to_ml"]
      }
    }
    ```
    """
    return ConversionCatalogResponse(conversions=list_conversions())


@router.post("/convert", response_model=ConversionResult)
async def convert(request: ConversionRequest):
    """Convert a value with one of the fixed conversions."""
    return convert_units(request.category, request.conversion, request.value)


@router.post("/random", response_model=RandomNumbersResponse)
async def random_numbers(request: RandomNumbersRequest):
    """
    Draw random integers in [minimum, maximum].

    Pass a seed to get the same numbers for the same request.
    At most MAX_RANDOM_COUNT numbers are drawn per request.
    """
    max_count = get_settings().MAX_RANDOM_COUNT
    if request.count > max_count:
        raise HTTPException(
            status_code=400,
            detail=f"Count of {request.count} exceeds the maximum of {max_count} numbers"
            )
    rng = random.Random(request.seed) if request.seed is not None else None
    numbers = generate_random_numbers(
        request.minimum,
        request.maximum,
        count=request.count,
        allow_duplicates=request.allow_duplicates,
        rng=rng,
        )
    return RandomNumbersResponse(numbers=numbers, count=len(numbers))
