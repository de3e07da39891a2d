from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MAX_BATCH_SIZE = 500


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - OVERDUE_TIMEZONE: IANA zone name used to decide what "today" is. Empty (default) means
      the system local time
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    - MAX_BATCH_SIZE: maximum number of items accepted by the batch endpoint (default: 500)
    - LOG_LEVEL: log level name for the service loggers (default: INFO)
    """

    timezone_name: Optional[str]
    cors_allow_origins: List[str]
    max_batch_size: int
    log_level: str

    @property
    def timezone(self) -> Optional[tzinfo]:
        """Resolved evaluation timezone, or None for system local time."""
        if not self.timezone_name:
            return None
        try:
            return ZoneInfo(self.timezone_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown OVERDUE_TIMEZONE %r; using local time", self.timezone_name)
            return None


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_int(value: str, default: int, minimum: int = 1) -> int:
    try:
        n = int(value.strip())
    except ValueError:
        return default
    return n if n >= minimum else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    tz_name = _get_env("OVERDUE_TIMEZONE", "").strip() or None
    origins = _parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*"))
    max_batch = _parse_int(_get_env("MAX_BATCH_SIZE", str(DEFAULT_MAX_BATCH_SIZE)), DEFAULT_MAX_BATCH_SIZE)

    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        # Unknown level names fall back to INFO
        log_level = "INFO"

    return Settings(
        timezone_name=tz_name,
        cors_allow_origins=origins,
        max_batch_size=max_batch,
        log_level=log_level,
    )
