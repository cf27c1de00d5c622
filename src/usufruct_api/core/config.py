# Usufruct API - Usufruct Value Calculation Service
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Configuration management using Pydantic Settings."""

from pathlib import Path

from beartype import beartype
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__

DEFAULT_FACTOR_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "factor_methods.json"


class Settings(BaseSettings):
    """Application settings with immutable configuration."""

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        frozen=True,  # Immutable settings
        validate_default=True,
        extra="forbid",
    )

    # API Configuration
    app_name: str = Field(
        default="Usufruct API",
        description="Application name",
        min_length=1,
    )
    app_version: str = Field(
        default=__version__,
        description="Application version reported by info and health endpoints",
        min_length=1,
    )
    api_host: str = Field(
        default="0.0.0.0",  # nosec B104 - Binding to all interfaces is needed for containerized deployment
        description="API host to bind to",
    )
    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="API port to bind to",
    )
    api_env: str = Field(
        default="development",
        pattern="^(development|staging|production)$",
        description="API environment",
    )
    api_cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:4200", "https://localhost:4200"],
        description="Allowed CORS origins",
    )
    allowed_hosts: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Host headers accepted by the trusted host middleware",
        min_length=1,
    )

    # Factor tables
    factor_config_path: Path = Field(
        default=DEFAULT_FACTOR_CONFIG_PATH,
        description="JSON file holding the age adjustment policy and factor tables",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Root log level",
    )

    # Rate limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable per-client rate limiting",
    )
    rate_limit_requests: int = Field(
        default=10,
        ge=1,
        le=10_000,
        description="Requests allowed per client within one window",
    )
    rate_limit_window_seconds: int = Field(
        default=10,
        ge=1,
        le=3600,
        description="Rate limiting window length in seconds",
    )

    # Feature Flags
    enable_debug_endpoints: bool = Field(
        default=False,
        description="Expose endpoints that exist only to exercise error handling",
    )

    @field_validator("api_cors_origins")
    @classmethod
    def validate_cors_origins(cls: type["Settings"], v: list[str]) -> list[str]:
        """Validate CORS origins are proper URLs."""
        for origin in v:
            if not origin.startswith(("http://", "https://")):
                raise ValueError(f"Invalid CORS origin: {origin}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls: type["Settings"], v: object) -> object:
        """Accept log levels in any case."""
        return v.upper() if isinstance(v, str) else v

    @property
    @beartype
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.api_env == "production"

    @property
    @beartype
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.api_env == "development"


_settings: Settings | None = None


@beartype
def get_settings() -> Settings:
    """Get cached settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


@beartype
def clear_settings_cache() -> None:
    """Clear settings cache (for testing)."""
    global _settings
    _settings = None
