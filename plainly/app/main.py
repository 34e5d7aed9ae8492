"""
Plainly FastAPI application.
Serves the calculation engine to the web and mobile front-ends.

Run with:
    uvicorn plainly.app.main:app --port 8000
    uvicorn plainly.app.main:app --port 8001 --test   # test mode
"""
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from plainly.app.api.v1.router import router as api_v1_router
from plainly.app.config import get_settings, set_test_mode, is_test_mode
from plainly.app.logging_config import configure_logging, get_logger
from plainly.app.schemas.common import CalculationErrorResponse
from plainly.app.utils.validation_utils import CalculationError

# `--test` is ours, not uvicorn's: consume it before the settings are read
if "--test" in sys.argv:
    sys.argv.remove("--test")
    set_test_mode(True)
    print("[Plainly] 🧪 Test mode enabled (no log file, TEST_PORT)")

settings = get_settings()

configure_logging(
    settings.LOG_LEVEL,
    enable_file_logging=settings.ENABLE_FILE_LOGGING,
    log_dir=settings.LOG_DIR,
    )
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Log the limits the API is serving with."""
    logger.info(
        "Starting Plainly",
        version=settings.VERSION,
        test_mode=is_test_mode(),
        max_schedule_months=settings.MAX_SCHEDULE_MONTHS,
        max_random_count=settings.MAX_RANDOM_COUNT,
        )
    yield
    logger.info("Shutting down Plainly")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    redoc_url=f"{settings.API_V1_PREFIX}/redoc",
    lifespan=lifespan,
    )

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    )


@app.exception_handler(CalculationError)
async def calculation_error_handler(request: Request, exc: CalculationError) -> JSONResponse:
    """Map rejected calculator input to HTTP 400 with the error kind."""
    logger.debug(
        "Calculation rejected",
        path=request.url.path,
        kind=exc.kind,
        field=exc.field,
        error=str(exc),
        )
    body = CalculationErrorResponse(detail=str(exc), kind=exc.kind, field=exc.field)
    return JSONResponse(status_code=400, content=body.model_dump())


app.include_router(api_v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Service name, version and where the interactive docs live."""
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
        }
