# app/core/config.py
"""Configuration settings for the Project Workspace API.

Uses Pydantic BaseSettings for environment variable management.
"""
import secrets
from enum import Enum

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentEnum(str, Enum):
    development = "development"
    testing = "testing"
    staging = "staging"
    production = "production"


class LogLevelEnum(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormatEnum(str, Enum):
    simple = "simple"
    json = "json"


class Settings(BaseSettings):
    # Pydantic v2 settings configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===== Application Settings =====
    app_name: str = Field(default="Project Workspace API", description="Application name")
    environment: EnvironmentEnum = Field(
        default=EnvironmentEnum.development, description="Environment type"
    )
    debug: bool = Field(default=False, description="Debug mode")
    version: str = Field(default="1.0.0", description="Application version")

    # ===== Security Settings =====
    secret_key: str = Field(
        default_factory=lambda: secrets.token_urlsafe(32),
        description="Secret key used to verify bearer tokens",
    )
    algorithm: str = Field(default="HS256", description="JWT algorithm")
    identity_claim: str = Field(
        default="email", description="Token claim that carries the user identity"
    )

    # ===== Database Settings =====
    database_url: str | None = Field(default=None, description="Database connection URL")
    db_pool_size: int = Field(default=20, description="Database connection pool size")
    db_max_overflow: int = Field(default=0, description="Database max overflow connections")

    # Test database URL
    test_database_url: str | None = Field(default=None, description="Test database URL")

    # ===== Workspace Limits =====
    max_file_name_length: int = Field(default=255, description="Maximum file or folder name length")
    max_project_name_length: int = Field(default=100, description="Maximum project name length")
    max_conversation_title_length: int = Field(
        default=200, description="Maximum conversation title length"
    )

    # ===== CORS Settings =====
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
        description="Allowed CORS origins (comma-separated)",
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # ===== Monitoring & Logging =====
    log_level: LogLevelEnum = Field(default=LogLevelEnum.INFO, description="Logging level")
    log_format: LogFormatEnum = Field(default=LogFormatEnum.simple, description="Log format")

    # ===== Server Settings =====
    host: str = Field(default="127.0.0.1", description="Host to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")

    # ===== Computed Properties =====
    @property
    def is_development(self) -> bool:
        return self.environment == EnvironmentEnum.development

    @property
    def is_production(self) -> bool:
        return self.environment == EnvironmentEnum.production

    @property
    def is_testing(self) -> bool:
        return self.environment == EnvironmentEnum.testing

    @property
    def is_sqlite(self) -> bool:
        return bool(self.database_url) and self.database_url.startswith("sqlite")

    @property
    def database_url_sync(self) -> str:
        if not self.database_url:
            return ""
        return self.database_url.replace("postgresql+asyncpg://", "postgresql://").replace(
            "sqlite+aiosqlite://", "sqlite://"
        )

    # ===== Validation Methods =====
    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        if v and isinstance(v, str):
            lv = v.lower()
            if lv in ["dev", "develop"]:
                return "development"
            if lv in ["prod"]:
                return "production"
            if lv in ["test"]:
                return "testing"
        return v

    @field_validator("max_file_name_length")
    @classmethod
    def validate_file_name_length(cls, v):
        if not 1 <= v <= 255:
            raise ValueError("File name length limit must be between 1 and 255")
        return v

    @model_validator(mode="after")
    def set_computed_fields(self):
        if not self.test_database_url and self.database_url and "neondb" in self.database_url:
            self.test_database_url = self.database_url.replace("neondb", "neondb_test")
        return self


settings = Settings()


class ConfigValidator:
    @staticmethod
    def validate_required_settings():
        errors = []
        if not settings.database_url:
            errors.append("DATABASE_URL is required")
        if settings.is_production and settings.is_sqlite:
            errors.append("SQLite is not supported in production")
        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")


def get_config_summary() -> dict:
    return {
        "app_name": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "debug": settings.debug,
        "database_configured": bool(settings.database_url),
        "log_level": settings.log_level,
        "log_format": settings.log_format,
    }


__all__ = [
    "settings",
    "Settings",
    "ConfigValidator",
    "get_config_summary",
    "EnvironmentEnum",
    "LogLevelEnum",
    "LogFormatEnum",
]
