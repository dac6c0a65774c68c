"""Logging module."""

import logging
import os
from datetime import datetime

import pytz
from colorlog import ColoredFormatter
from dotenv import load_dotenv

load_dotenv()

LOGGER_NAME = "github_activity"

log_level = os.getenv("LOG_LEVEL", "warning").upper()
log_tz_name = os.getenv("LOG_TZ", "UTC")
try:
    log_tz = pytz.timezone(log_tz_name)
except pytz.UnknownTimeZoneError:
    logging.getLogger(LOGGER_NAME).warning(
        "Unknown timezone `%s`, defaulting to `UTC`.",
        log_tz_name,
    )
    log_tz = pytz.utc

LOG_COLORS = {
    "DEBUG": "white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


class TimezoneFormatter(ColoredFormatter):
    """Colorized formatter that stamps records in the configured timezone."""

    def formatTime(  # noqa: N802
        self,
        record: logging.LogRecord,
        datefmt: str | None = None,  # noqa: ARG002
    ) -> str:
        """Convert record time to the configured timezone."""
        utc_dt = datetime.fromtimestamp(record.created, tz=pytz.utc)
        # Use ISO 8601 format
        return utc_dt.astimezone(log_tz).isoformat()


def configure_logging(logger_name: str = LOGGER_NAME) -> logging.Logger:
    """Set up stderr logging with colorized output.

    Stdout is reserved for the activity listing, so the handler always
    writes to stderr.
    """
    logger = logging.getLogger(logger_name)
    if logger.handlers:
        # Avoid re-adding handlers if the logger is already configured
        return logger

    level = getattr(logging, log_level, logging.WARNING)
    logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        TimezoneFormatter(
            "%(log_color)s%(asctime)s - PID %(process)d - %(name)s - "
            "%(levelname)s - %(message)s",
            log_colors=LOG_COLORS,
        ),
    )
    logger.addHandler(console_handler)
    logger.propagate = False

    return logger
