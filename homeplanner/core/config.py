from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOMEPLANNER_", env_file=".env", extra="ignore")

    # Any SQLAlchemy URL; SQLite is the zero-setup default for local use.
    database_url: str = "sqlite:///./homeplanner.db"
    # Production schemas come from `alembic upgrade head`.
    auto_create_schema: bool = False

    jwt_secret: str = "change-me"
    jwt_expire_minutes: int = 7 * 24 * 60

    # Session token is kept in an HttpOnly cookie; bearer headers are accepted too.
    auth_cookie_name: str = "homeplanner_session"
    auth_cookie_samesite: str = "lax"  # lax|strict|none
    auth_cookie_secure: bool = False

    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000,http://localhost:8000,http://127.0.0.1:8000"

    default_currency: str = Field(default="USD", min_length=3, max_length=3)
    seed_system_suggestions: bool = True
    suggestion_search_limit: int = Field(default=10, ge=1, le=50)

    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
