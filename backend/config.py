"""
Performer Map API configuration

Everything comes from environment variables. The Settings object doubles as
the env bag handed to every data source, so provider secrets are read from it
at fetch time and never copied anywhere else.
"""

import logging
import os
from functools import lru_cache
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# DEFAULTS
# ============================================================================

DEFAULT_DATA_SOURCES = ["stripchat"]
DEFAULT_CACHE_TTL_SECONDS = 60
DEFAULT_CACHE_MAX_ENTRIES = 128
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    # Provider secrets
    STRIPCHAT_USERID: Optional[str] = None
    STRIPCHAT_BEARER: Optional[str] = None

    # Registry names of the sources to aggregate
    DATA_SOURCES: List[str] = Field(default_factory=lambda: list(DEFAULT_DATA_SOURCES))

    # Static asset fallback; None disables it
    ASSETS_DIR: Optional[str] = None

    CACHE_TTL_SECONDS: int = DEFAULT_CACHE_TTL_SECONDS
    CACHE_MAX_ENTRIES: int = DEFAULT_CACHE_MAX_ENTRIES
    HTTP_TIMEOUT: float = DEFAULT_HTTP_TIMEOUT
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL


def _split_csv(raw: Optional[str], default: List[str]) -> List[str]:
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def _log_level(raw: Optional[str]) -> str:
    """Known logging level name, INFO for anything unrecognized"""
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Build Settings from the current environment"""
    return Settings(
        STRIPCHAT_USERID=os.getenv("STRIPCHAT_USERID") or None,
        STRIPCHAT_BEARER=os.getenv("STRIPCHAT_BEARER") or None,
        DATA_SOURCES=_split_csv(os.getenv("DATA_SOURCES"), DEFAULT_DATA_SOURCES),
        ASSETS_DIR=os.getenv("ASSETS_DIR") or None,
        CACHE_TTL_SECONDS=int(os.getenv("CACHE_TTL_SECONDS", DEFAULT_CACHE_TTL_SECONDS)),
        CACHE_MAX_ENTRIES=int(os.getenv("CACHE_MAX_ENTRIES", DEFAULT_CACHE_MAX_ENTRIES)),
        HTTP_TIMEOUT=float(os.getenv("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT)),
        LOG_LEVEL=_log_level(os.getenv("LOG_LEVEL")),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read once"""
    return load_settings()
