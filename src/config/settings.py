"""
Lucky Toss - Application Settings

Loads configuration from environment variables (prefix ``LUCKY_TOSS_``)
or a local ``.env`` file using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game rules
    default_target: int = Field(default=101, gt=0)
    tie_break_max_rounds: int | None = Field(default=None, ge=1)

    # Randomness
    rng_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "LUCKY_TOSS_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the ``src`` logger tree."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {settings.log_level!r}.")
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("src").setLevel(level)
