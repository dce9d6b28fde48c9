"""Client configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Values are validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_EXPORTERS = ("console", "otlp", "none")


class Settings(BaseSettings):
    """Client settings loaded from environment and .env.

    All settings have defaults; validate_values rejects combinations that
    cannot work (bad URL scheme, non-positive timings, unknown exporter).
    """

    # App
    app_name: str = "pof-client"
    app_version: str = "0.1.0"
    debug: bool = False

    # Backend
    backend_base_url: str = "http://localhost:3030"
    # Per-request HTTP timeout; expiry surfaces as TransportError.
    request_timeout_seconds: float = 30.0

    # Job polling: bounds staleness of observed status, not call latency.
    poll_interval_seconds: float = 5.0

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
    def validate_values(self) -> "Settings":
        """Validate backend URL, timings, and telemetry exporter.

        - backend_base_url must use http or https.
        - poll_interval_seconds and request_timeout_seconds must be positive.
        - telemetry_exporter must be one of console, otlp, none; otlp needs an endpoint.
        """
        if not self.backend_base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"backend_base_url must start with http:// or https://, got: {self.backend_base_url!r}"
            )
        if self.poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be greater than 0")
        if self.request_timeout_seconds <= 0:
            raise ValueError("request_timeout_seconds must be greater than 0")
        if not 0.0 <= self.telemetry_sample_rate <= 1.0:
            raise ValueError("telemetry_sample_rate must be between 0.0 and 1.0")
        if self.telemetry_exporter not in _EXPORTERS:
            raise ValueError(
                f"telemetry_exporter must be one of {', '.join(_EXPORTERS)}, "
                f"got: {self.telemetry_exporter!r}"
            )
        if self.telemetry_exporter == "otlp" and not self.telemetry_otlp_endpoint:
            raise ValueError(
                "TELEMETRY_OTLP_ENDPOINT is required when telemetry_exporter is 'otlp'."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached client settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
