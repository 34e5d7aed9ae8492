"""
Logging configuration for the Plainly calculation engine.

structlog on top of the stdlib logging handlers:
- console handler on stdout, always on
- optional file handler, rotated weekly and gzipped
- one JSON line per event on both

The formula modules never configure logging themselves: the API entry point
(or a test harness) calls configure_logging() once, and every module obtains
its logger through get_logger(__name__).
"""
import gzip
import logging
import logging.handlers
import shutil
import sys
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import EventDict

LOG_FILE_NAME = "plainly.log"
LOG_BACKUP_WEEKS = 52
DEFAULT_LOG_DIR = Path(__file__).parent.parent.parent / "logs"


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Store the upper-case level name under "level" ("warn" is reported as WARNING)."""
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def stringify_amounts(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Render Decimal and Enum values by value.

    JSONRenderer would otherwise fall back to repr(), logging
    "Decimal('212.47')" instead of "212.47".
    """
    for key, value in event_dict.items():
        if isinstance(value, Decimal):
            event_dict[key] = str(value)
        elif isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _gz_namer(default_name: str) -> str:
    """plainly.log.2026-10-19 -> plainly.log.2026-10-19.gz"""
    return default_name + ".gz"


def _gz_rotator(source: str, dest: str) -> None:
    """Gzip a rotated log file and drop the uncompressed original."""
    with open(source, 'rb') as f_in:
        with gzip.open(dest, 'wb') as f_out:
            shutil.copyfileobj(f_in, f_out)

    Path(source).unlink()


def _build_file_handler(log_dir: Path, numeric_level: int) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)

    # W0 = rotate every Monday at midnight (UTC)
    file_handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_dir / LOG_FILE_NAME),
        when="W0",
        interval=1,
        backupCount=LOG_BACKUP_WEEKS,
        encoding="utf-8",
        utc=True
        )
    file_handler.setLevel(numeric_level)
    file_handler.rotator = _gz_rotator
    file_handler.namer = _gz_namer
    return file_handler


def configure_logging(
    log_level: str = "INFO",
    enable_file_logging: bool = True,
    log_dir: Optional[Path] = None
    ) -> None:
    """
    Configure structured logging for the process.

    Safe to call more than once: handlers from a previous call are replaced.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL (unknown names fall back to INFO)
        enable_file_logging: Also write to <log_dir>/plainly.log
        log_dir: Directory of the log file (default: <repo>/logs)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    handlers: list[logging.Handler] = [console_handler]

    if enable_file_logging:
        handlers.append(_build_file_handler(log_dir or DEFAULT_LOG_DIR, numeric_level))

    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=numeric_level,
        force=True
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            stringify_amounts,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
            ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    Usage:
        logger = get_logger(__name__)
        logger.debug("Loan calculated", monthly_payment=result.monthly_payment)
    """
    return structlog.get_logger(name)
