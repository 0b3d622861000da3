"""Runtime settings from environment variables (.env is loaded by the entry point)."""

import logging
import os
from dataclasses import dataclass

import phonenumbers

logger = logging.getLogger(__name__)

DEFAULT_COUNTRY = "US"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    default_country: str = DEFAULT_COUNTRY
    log_level: str = DEFAULT_LOG_LEVEL


def _country_from_env(value: str) -> str:
    country = value.strip().upper()
    if not country:
        return DEFAULT_COUNTRY
    if country not in phonenumbers.SUPPORTED_REGIONS:
        logger.warning(
            "OUTREACH_DEFAULT_COUNTRY=%r is not a supported region; using %s",
            value,
            DEFAULT_COUNTRY,
        )
        return DEFAULT_COUNTRY
    return country


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Read OUTREACH_DEFAULT_COUNTRY and OUTREACH_LOG_LEVEL."""
    env = os.environ if environ is None else environ
    level = env.get("OUTREACH_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        level = DEFAULT_LOG_LEVEL
    return Settings(
        default_country=_country_from_env(env.get("OUTREACH_DEFAULT_COUNTRY", "")),
        log_level=level,
    )
