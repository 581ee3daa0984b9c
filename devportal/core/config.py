"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Databricks credentials are optional at load time so
the DRN and scaffolder routes work without them; the Databricks client
fails on first use when they are missing.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "devportal-plugins"
    app_version: str = "1.0.0"
    debug: bool = False

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:7007"

    # Databricks account API (workspace name availability)
    databricks_base_url: str = ""
    databricks_account_id: str = ""
    databricks_client_id: str = ""
    databricks_client_secret: SecretStr = SecretStr("")
    databricks_token_ttl_seconds: float = 50 * 60
    databricks_workspace_ttl_seconds: float = 2 * 60
    databricks_http_timeout_seconds: float = 30.0
    ws_validate_rate_limit: str = "60/minute"

    # Scaffolder: links from pending DRNs to the approval template
    app_base_url: str = ""
    drn_approval_template_path: str = ""

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_cache_ttls(self) -> "Settings":
        """TTLs must be positive; a zero TTL would defeat both upstream caches."""
        if self.databricks_token_ttl_seconds <= 0:
            raise ValueError("DATABRICKS_TOKEN_TTL_SECONDS must be greater than 0")
        if self.databricks_workspace_ttl_seconds <= 0:
            raise ValueError("DATABRICKS_WORKSPACE_TTL_SECONDS must be greater than 0")
        return self

    @property
    def databricks_configured(self) -> bool:
        """True when every credential needed for the token grant is set."""
        return bool(
            self.databricks_base_url
            and self.databricks_account_id
            and self.databricks_client_id
            and self.databricks_client_secret.get_secret_value()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
