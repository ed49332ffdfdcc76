from pydantic_settings import BaseSettings
from functools import lru_cache

from levymate.core.models import PolicyYear


class Settings(BaseSettings):
    APP_NAME: str = "LevyMate Tax Engine API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Regime used when a request does not name one
    DEFAULT_POLICY: PolicyYear = PolicyYear.ACT_2026_PROPOSED

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
