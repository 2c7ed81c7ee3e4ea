"""Application settings loaded from environment variables."""

import os
import logging

logger = logging.getLogger(__name__)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).lower() in ("1", "true", "yes")


class Settings:
    """Application configuration loaded from environment variables"""

    # Logging
    LOG_LEVEL = os.environ.get("FLOORPLANNER_LOG_LEVEL", "INFO").upper()

    # HTTP server
    HOST = os.environ.get("FLOORPLANNER_HOST", "0.0.0.0")
    PORT = int(os.environ.get("FLOORPLANNER_PORT", "8000"))
    RELOAD = _env_bool("FLOORPLANNER_RELOAD")

    # Comma-separated; "*" allows the Vite dev server and anything else
    CORS_ORIGINS = [
        o.strip()
        for o in os.environ.get("FLOORPLANNER_CORS_ORIGINS", "*").split(",")
        if o.strip()
    ]

    @classmethod
    def validate(cls):
        """Validate critical configuration values"""
        if logging.getLevelName(cls.LOG_LEVEL) == f"Level {cls.LOG_LEVEL}":
            logger.warning("Unknown log level %r, falling back to INFO", cls.LOG_LEVEL)
            cls.LOG_LEVEL = "INFO"

        if cls.CORS_ORIGINS == ["*"]:
            logger.warning("CORS allows every origin - not suitable for production")
