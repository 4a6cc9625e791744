"""Application configuration."""

from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROFILE_UPDATE_FIELDS = "name,email,gender,weight,height,age,goal,exerciseType,bmi"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_parse_none_str="null",
    )

    # Application
    app_name: str = Field(default="Fitness Server", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    api_prefix: str = Field(default="", alias="API_PREFIX")

    # Server
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    reload: bool = Field(default=False, alias="RELOAD")

    # Database
    database_url: str = Field(..., alias="DATABASE_URL")
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=20, alias="DB_MAX_OVERFLOW")
    auto_create_tables: bool = Field(default=False, alias="AUTO_CREATE_TABLES")

    # Outbound mail
    mail_user: str = Field(..., alias="MAIL_USER")
    mail_password: str = Field(..., alias="MAIL_PASSWORD")
    mail_host: str = Field(default="smtp.gmail.com", alias="MAIL_HOST")
    mail_port: int = Field(default=587, alias="MAIL_PORT")
    mail_use_tls: bool = Field(default=True, alias="MAIL_USE_TLS")
    mail_recipient: str | None = Field(
        default=None,
        alias="MAIL_RECIPIENT",
        description="Inbox receiving contact messages; defaults to MAIL_USER",
    )

    # Profile policies
    bmi_height_unit: Literal["cm", "ft"] = Field(
        default="cm",
        alias="BMI_HEIGHT_UNIT",
        description="Unit of the height submitted with vitals (centimeters or feet)",
    )
    profile_update_fields_str: str = Field(
        default=DEFAULT_PROFILE_UPDATE_FIELDS,
        alias="PROFILE_UPDATE_FIELDS",
    )

    # CORS
    cors_origins_str: str = Field(default="*", alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=False, alias="CORS_ALLOW_CREDENTIALS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    @property
    def cors_origins(self) -> list[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def profile_update_fields(self) -> frozenset[str]:
        """Wire names of the profile fields `/user-update` may write."""
        return frozenset(
            name.strip() for name in self.profile_update_fields_str.split(",") if name.strip()
        )

    @property
    def mail_to(self) -> str:
        """Recipient of relayed contact messages."""
        return self.mail_recipient or self.mail_user

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"


def load_settings(**overrides: Any) -> Settings:
    """
    Build settings, exiting the process when required values are missing.

    Raises:
        SystemExit: If the store connection string or mail credentials are absent
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        missing = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
        structlog.get_logger().critical("configuration_invalid", fields=missing)
        raise SystemExit(1) from e


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return load_settings()


# Global settings instance
settings = get_settings()
