"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from domain.enums import SourceId


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.

    A single instance is built at process start and handed to the
    orchestrators, providers and notifier that need it.
    """

    # Application settings
    app_name: str = Field(default="ReglementAlert", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, ge=1, le=65535, description="Server port")

    # Database settings
    database_url: str = Field(
        default="postgresql+psycopg2://postgres@localhost:5432/reglement",
        description="SQLAlchemy connection URL",
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_init_attempts: int = Field(
        default=8, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_prefix: str = Field(default="", description="API route prefix")
    api_title: str = Field(
        default="ReglementAlert API", description="API documentation title"
    )
    api_description: str = Field(
        default="Cross-references monitored ingredients against regulatory watch-lists",
        description="API documentation description",
    )

    # Scheduled check
    cron_secret: Optional[str] = Field(
        default=None, description="Shared secret expected as bearer token by the cron endpoint"
    )
    tenant_concurrency: int = Field(
        default=1, ge=1, le=32, description="Tenants processed in parallel by the daily check"
    )

    # Regulatory sources
    enabled_sources: list[SourceId] = Field(
        default=[SourceId.ECHA_SVHC, SourceId.EUR_LEX, SourceId.ANSM],
        description="Source providers queried on every run, in this order",
    )
    source_timeout_seconds: float = Field(
        default=15.0, gt=0, description="Timeout for a single live source fetch"
    )
    echa_svhc_url: str = Field(
        default="https://echa.europa.eu/candidate-list-table",
        description="ECHA candidate list table",
    )
    echa_min_live_results: int = Field(
        default=200,
        ge=0,
        description="Live ECHA rows required before the snapshot is bypassed",
    )
    ansm_search_url: str = Field(
        default="https://ansm.sante.fr/rechercher?category=cosmetiques",
        description="ANSM cosmetics search page",
    )
    ansm_min_live_results: int = Field(
        default=3, ge=0, description="Live ANSM rows required before the snapshot is bypassed"
    )

    # Matching policy
    min_name_length: int = Field(
        default=4,
        ge=1,
        description="Names shorter than this only match by full equality",
    )
    name_fallback_on_cas_mismatch: bool = Field(
        default=False,
        description="Compare names when both CAS numbers are present but differ",
    )

    # Notifications
    resend_api_key: Optional[str] = Field(
        default=None, description="Resend API key; alerts are only logged when unset"
    )
    resend_api_url: str = Field(
        default="https://api.resend.com/emails", description="Resend send endpoint"
    )
    email_from: str = Field(
        default="ReglementAlert <onboarding@resend.dev>", description="Sender address"
    )
    email_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Timeout for the email API call"
    )
    site_url: str = Field(
        default="http://localhost:3000", description="Public URL used for dashboard links"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("cron_secret", "resend_api_key", mode="before")
    @classmethod
    def blank_secret_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
