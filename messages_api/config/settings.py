from typing import Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    """Database configuration"""

    url: Optional[str] = None
    host: str = "localhost"
    port: int = 5433
    user: Optional[str] = None
    password: Optional[SecretStr] = None
    db_name: Optional[str] = None

    @field_validator("url", "user", "db_name", "password", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("host", mode="before")
    @classmethod
    def _blank_host(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return "localhost"
        return value

    @field_validator("port", mode="before")
    @classmethod
    def _blank_port(cls, value):
        if value is None or (isinstance(value, str) and not value.strip()):
            return 5433
        return value

    model_config = SettingsConfigDict(
        env_prefix="DATABASE_",
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Messages API"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 3000
    api_prefix: str = "/api/v1"
    log_file: str = "logs/app.log"

    # Database
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() == "production"


def get_settings() -> Settings:
    """Build the settings object from the environment.

    Called once by the application factory and the migration command; the
    resulting instance is passed around explicitly.
    """

    return Settings()
