from typing import Optional
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Querydsl Study"
    APP_DESCRIPTION: str = "FastAPI application bootstrap with a session-bound query helper"
    APP_VERSION: str = "0.0.1"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True

    # --- Server defaults passed to the runner (CLI arguments win) ---
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # --- Database (SQLModel, async driver) ---
    DB_DRIVER: str = "mysql+aiomysql"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = "root"
    DB_NAME: str = "querydsl"
    DB_ECHO: bool = False
    # Full URL, e.g. sqlite+aiosqlite:///./local.db; takes precedence over DB_* parts
    DATABASE_URL_OVERRIDE: Optional[str] = None

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        safe_password = quote_plus(self.DB_PASSWORD)
        return f"{self.DB_DRIVER}://{self.DB_USER}:{safe_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # --- Query helper ---
    # Off by default: get_query_factory raises until this is enabled
    QUERY_FACTORY_ENABLED: bool = False

    # --- Logging ---
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    # --- API route prefix ---
    API_V1_PREFIX: str = "/api/v1"

    # --- Gunicorn process name (optional) ---
    GUNICORN_PROC_NAME: Optional[str] = None  # Fallback to APP_NAME when empty

    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
