"""
Application configuration module.

Settings of the HTTP surface around the calculation engine. The formulas
themselves take no configuration: every knob here limits or observes what
the API serves.
"""
import os
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root (plainly/app/config.py -> three levels up)
PROJECT_ROOT = Path(__file__).parent.parent.parent

TEST_MODE_ENV = "PLAINLY_TEST_MODE"

# Test mode is switched on by `--test` on the uvicorn command line or PLAINLY_TEST_MODE=1
_test_mode = os.environ.get(TEST_MODE_ENV, "").lower() in ("1", "true", "yes")


def set_test_mode(enabled: bool = True):
    """
    Enable/disable test mode globally.

    Test mode keeps test runs quiet on disk (no log file) and moves the
    server to TEST_PORT. The flag is mirrored into the environment so that
    subprocesses started by the test runner inherit it.
    """
    global _test_mode
    _test_mode = enabled
    os.environ[TEST_MODE_ENV] = "1" if enabled else "0"


def is_test_mode() -> bool:
    return _test_mode


class Settings(BaseSettings):
    """
    Settings read from environment variables, then from `.env`.

    Field names are the variable names (case sensitive), e.g.
    `MAX_SCHEDULE_MONTHS=360 uvicorn plainly.app.main:app`.
    """
    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Plainly"
    VERSION: str = "0.1.0"

    # Server
    PORT: int = 8000
    TEST_PORT: int = 8001

    # Logging
    LOG_LEVEL: str = "INFO"
    ENABLE_FILE_LOGGING: bool = True
    LOG_DIR: Optional[Path] = None  # None = <repo>/logs

    # Request limits (payload size guards, not formula domains)
    MAX_SCHEDULE_MONTHS: int = 600  # 50-year amortization schedule
    MAX_RANDOM_COUNT: int = 1000
    MAX_BREAKDOWN_YEARS: int = 200  # compound-interest yearly breakdown rows

    # CORS: web front-end dev servers
    BACKEND_CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        )


def get_settings() -> Settings:
    """
    Build the settings for the current process.

    A fresh instance is returned on each call so tests can change the
    environment between calls. In test mode, file logging is off and PORT
    becomes TEST_PORT.
    """
    settings = Settings()

    if is_test_mode():
        settings.ENABLE_FILE_LOGGING = False
        settings.PORT = settings.TEST_PORT

    return settings
