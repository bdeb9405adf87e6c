"""Application configuration via pydantic-settings.

Deployment concerns only (where factors are persisted, the admin secret,
branding printed on reports, log level). Calculators never read settings:
they receive an explicit CalculationFactors object.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Where the tuned calculation factors are persisted."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    factors_backend: str = Field(
        default="file",
        description="Persistence backend for factors: file, redis or memory",
    )
    factors_storage_key: str = Field(
        default="nossa-seguros-factors",
        description="Name of the slot holding the persisted factors",
    )
    factors_dir: Path = Field(
        default=Path.home() / ".compensacoes",
        description="Directory for the file backend",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection string for the redis backend",
    )

    @field_validator("factors_backend")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        """Ensure the backend is one we know how to build."""
        valid = {"file", "redis", "memory"}
        lower = v.lower()
        if lower not in valid:
            msg = f"Invalid factors backend: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return lower

    @property
    def factors_file(self) -> Path:
        """JSON document used by the file backend."""
        return self.factors_dir / f"{self.factors_storage_key}.json"


class SecuritySettings(BaseSettings):
    """Admin overlay access."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    admin_password: str = Field(
        default="Admin2026",
        description="Single shared secret unlocking the factor editor",
    )


class BrandingSettings(BaseSettings):
    """Branding and contact details printed on exported reports."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    company_name: str = Field(default="Nossa Seguros")
    app_title: str = Field(default="Simulador de Cálculo")
    app_subtitle: str = Field(default="Compensações AT")
    contact_phone: str = Field(default="+244 923 190 860")
    contact_email: str = Field(default="apoioaocliente@nossaseguros.ao")
    disclaimer: str = Field(
        default="Este documento é meramente indicativo e não constitui compromisso contratual.",
    )


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.storage.factors_file
        settings.security.admin_password
        settings.branding.company_name
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    storage: StorageSettings = Field(default_factory=StorageSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)
    branding: BrandingSettings = Field(default_factory=BrandingSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton — import this wherever settings are needed.
settings = Settings()
