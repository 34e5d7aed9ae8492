"""
API v1 router: one sub-router per calculator family, plus the service health check.
"""
from fastapi import APIRouter

from plainly.app.api.v1 import dates, finance, health_metrics
from plainly.app.api.v1.utilities import router as utilities_router
from plainly.app.config import get_settings
from plainly.app.logging_config import get_logger
from plainly.app.schemas.utilities import HealthCheckResponse

logger = get_logger(__name__)

router = APIRouter()

router.include_router(finance.finance_router)
router.include_router(health_metrics.health_router)
router.include_router(dates.dates_router)
router.include_router(utilities_router)


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Liveness check for the front-ends; reports the running version."""
    logger.info("Health check requested")
    return HealthCheckResponse(status="ok", version=get_settings().VERSION)
