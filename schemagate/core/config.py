from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Compilation
    DEFAULT_DRAFT: str = "2020-12"
    VALIDATE_FORMATS: bool = False

    # Regex engine
    REGEX_CACHE_SIZE: int = 10
    REGEX_TIMEOUT: float = 1.0  # Seconds per match before the matcher gives up

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    class Config:
        env_prefix = "SCHEMAGATE_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
