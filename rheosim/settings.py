from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import ModelKind

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RHEOSIM_", env_file=".env", extra="ignore")

    log_level: str = "WARNING"
    output_dir: str = "."
    default_model: ModelKind = ModelKind.POWER_LAW
    cache_size: int = 256

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
