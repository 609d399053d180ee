"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class PoiskKinoConfig(BaseModel):
    """Catalog API access settings (YAML section: poiskkino.*)."""

    api_key: str = Field(
        default="",
        description="PoiskKino API key. Empty disables all lookups.",
        repr=False,
    )
    base_url: str = Field(
        default="https://api.poiskkino.dev",
        description="API root without version segment.",
    )
    api_version: str = Field(
        default="v1.4",
        description="Version path segment prepended to every endpoint.",
    )
    timeout_seconds: float = Field(
        default=120.0,
        description="Per-request timeout in seconds (gate wait excluded).",
    )
    user_agent: str = Field(
        default="Kinolens/0.1.0",
        description="User-Agent sent with every request.",
    )
    search_limit: int = Field(
        default=3,
        description="Maximum number of search hits requested.",
    )
    positive_ttl_seconds: int = Field(
        default=86_400,
        description="How long found payloads stay cached (seconds).",
    )
    negative_ttl_seconds: int = Field(
        default=3_600,
        description="How long confirmed absences (404) stay cached (seconds).",
    )

    @field_validator("timeout_seconds")
    @classmethod
    def _validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout_seconds must be > 0")
        return v

    @field_validator("search_limit", "positive_ttl_seconds", "negative_ttl_seconds")
    @classmethod
    def _validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("value must be > 0")
        return v

    @model_validator(mode="after")
    def _validate_ttls(self) -> "PoiskKinoConfig":
        if self.negative_ttl_seconds >= self.positive_ttl_seconds:
            raise ValueError(
                "negative_ttl_seconds must be shorter than positive_ttl_seconds"
            )
        return self

    @property
    def configured(self) -> bool:
        return bool(self.api_key.strip())


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (poiskkino/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="kinolens", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    poiskkino: PoiskKinoConfig = Field(default_factory=PoiskKinoConfig)

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, object]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.

        The API key is masked.
        """
        poiskkino = self.poiskkino.model_dump()
        poiskkino["api_key"] = "***" if self.poiskkino.configured else ""
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "poiskkino": poiskkino,
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    Intended usage:
    - load.py creates EnvOverrides() to read KINOLENS_* variables,
      converts to dict of set values, merges into YAML/defaults,
      then validates AppConfig.

    Supported env var examples (flat, explicit):
    - KINOLENS_API_KEY or KINOLENS_POISKKINO_API_KEY (the latter wins)
    - KINOLENS_POISKKINO_TIMEOUT_SECONDS
    - KINOLENS_POISKKINO_BASE_URL
    - KINOLENS_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="KINOLENS_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    api_key: Optional[str] = None
    poiskkino_api_key: Optional[str] = None
    poiskkino_base_url: Optional[str] = None
    poiskkino_api_version: Optional[str] = None
    poiskkino_timeout_seconds: Optional[float] = None
    poiskkino_user_agent: Optional[str] = None
    poiskkino_search_limit: Optional[int] = None
    poiskkino_positive_ttl_seconds: Optional[int] = None
    poiskkino_negative_ttl_seconds: Optional[int] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, object]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
