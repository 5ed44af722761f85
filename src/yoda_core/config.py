"""
Configuration for yoda-core.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library defaults loaded from environment variables.

    Environment variables:
        YODA_CACHE_TTL: Default cache TTL in seconds. Default: 0.15 (150 ms),
                        roughly one editor redraw cycle.
        YODA_CACHE_WEAK: Hold weak-referenceable cache values weakly, so they
                         can vanish once the caller drops them. Default: false
        YODA_LOG_LEVEL: Level used by setup_logging(). Default: WARNING
    """

    model_config = SettingsConfigDict(env_prefix="YODA_")

    cache_ttl: float = Field(
        default=0.15,
        gt=0,
        description="Default cache TTL in seconds"
    )

    cache_weak: bool = Field(
        default=False,
        description="Allow early reclamation of weakly held cache values"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level name for the yoda_core logger"
    )

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


# Global settings instance
settings = Settings()
