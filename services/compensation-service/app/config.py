"""Configuration for Compensation Service."""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Compensation service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="compensation-service")
    SERVICE_HOST: str = Field(default="0.0.0.0")
    SERVICE_PORT: int = Field(default=8080, ge=1, le=65535)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=True)

    # Storage backend
    STORAGE_BACKEND: Literal["postgres", "memory"] = Field(default="postgres")

    # Database
    DATABASE_URL: Optional[str] = Field(default=None)
    DB_CONTAINER_NAME: str = Field(default="localhost")
    DB_USERNAME: str = Field(default="username")
    DB_PASSWORD: str = Field(default="password")
    DB_NAME: str = Field(default="username")
    DB_PORT: int = Field(default=5432, ge=1, le=65535)
    DATABASE_POOL_SIZE: int = Field(default=7, ge=1)
    DATABASE_POOL_MIN_SIZE: int = Field(default=1, ge=0)
    DATABASE_COMMAND_TIMEOUT: float = Field(default=10.0, gt=0)

    # Truncates the employees table on startup. Test and setup deployments only.
    CLEAR_DB_ON_STARTUP: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def database_dsn(self) -> str:
        """Build the Postgres DSN, preferring an explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql://{self.DB_USERNAME}:{self.DB_PASSWORD}"
            f"@{self.DB_CONTAINER_NAME}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()
