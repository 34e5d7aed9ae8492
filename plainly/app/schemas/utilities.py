"""
Pydantic schemas for utility endpoints (random picker, health check).
"""
from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict


class RandomNumbersRequest(BaseModel):
    """Request for the random number generator."""
    model_config = ConfigDict(extra="forbid")

    minimum: int = Field(..., description="Lowest value (inclusive)")
    maximum: int = Field(..., description="Highest value (inclusive)")
    count: int = Field(1, description="How many numbers to draw")
    allow_duplicates: bool = Field(True, description="Allow the same number more than once")
    seed: Optional[int] = Field(None, description="Seed for reproducible draws")


class RandomNumbersResponse(BaseModel):
    """Drawn numbers, in draw order."""
    model_config = ConfigDict(extra="forbid")

    numbers: List[int] = Field(..., description="Drawn numbers")
    count: int = Field(..., description="Number of values drawn (may be capped without duplicates)")


class HealthCheckResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
