"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single snapshot per process
    - Service identity (version, commit id) is resolved once, at first get_settings()
    - CORS values are consumed only through cors_policy(), never read ad hoc
    - CORS enabled with an empty origin is a configuration error

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults mirror the webserver.http.cors.* defaults: disabled, "*", "User-Task-ID"
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cruise_response.core.domain_types import CorsPolicy, ServiceIdentity


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # CORS
    cors_enabled: bool = False
    cors_origin: str = "*"
    cors_expose_headers: str = "User-Task-ID"

    # Service identity
    service_version: str = "unknown"
    commit_id: str = "unknown"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("cors_origin", "cors_expose_headers", mode="before")
    @classmethod
    def strip_header_value(cls, v: str) -> str:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def require_origin_when_enabled(self) -> "Settings":
        if self.cors_enabled and not self.cors_origin:
            raise ValueError("cors_origin must be set when cors_enabled is true")
        return self

    def cors_policy(self) -> CorsPolicy:
        return CorsPolicy(
            enabled=self.cors_enabled,
            allow_origin=self.cors_origin,
            expose_headers=self.cors_expose_headers,
        )

    def service_identity(self) -> ServiceIdentity:
        return ServiceIdentity(
            version=self.service_version, commit_id=self.commit_id,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
