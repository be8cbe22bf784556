from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database (sqlite:///... or postgresql://...)
    database_url: str = "sqlite:///./database.db"

    # Session cookie
    session_cookie_name: str = "session_id"
    session_max_age_hours: int = 24
    session_cookie_secure: bool = False

    # App
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
