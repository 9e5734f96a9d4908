"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "QUARTA_LOG_LEVEL"
CURRENCY_ENV = "QUARTA_CURRENCY"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_CURRENCY = "PHP"


@dataclass(frozen=True)
class Settings:
    """Process-level settings."""

    log_level: str = DEFAULT_LOG_LEVEL
    currency: str = DEFAULT_CURRENCY


def load_settings() -> Settings:
    """Build settings from QUARTA_* environment variables, falling back to defaults."""
    return Settings(
        log_level=os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
        currency=os.environ.get(CURRENCY_ENV) or DEFAULT_CURRENCY,
    )
