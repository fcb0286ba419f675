"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from RECORDRULES_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Engine
    SLOW_VALIDATION_MS: float = 50.0

    model_config = {"env_prefix": "RECORDRULES_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
