"""Environment-driven settings for the FastAPI application."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ("http://localhost:3000",)
DEFAULT_LOG_LEVEL = "INFO"


def get_cors_origins() -> list[str]:
    """Allowed CORS origins from ALVEO_CORS_ORIGINS (comma-separated)."""
    raw = os.environ.get("ALVEO_CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or list(DEFAULT_CORS_ORIGINS)


def configure_logging() -> None:
    """Set the root log level from ALVEO_LOG_LEVEL.

    Unknown level names fall back to INFO with a warning.
    """
    level_name = os.environ.get("ALVEO_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logging.basicConfig(level=DEFAULT_LOG_LEVEL)
        logger.warning("Unknown ALVEO_LOG_LEVEL %r; using %s", level_name, DEFAULT_LOG_LEVEL)
        return
    logging.basicConfig(level=level)
