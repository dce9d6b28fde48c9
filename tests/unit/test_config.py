"""Settings tests: defaults, env overrides, and validation."""

import pytest
from pydantic import ValidationError

from pof_client.core.config import Settings, get_settings


def test_defaults() -> None:
    settings = Settings()
    assert settings.backend_base_url == "http://localhost:3030"
    assert settings.poll_interval_seconds == 5.0
    assert settings.request_timeout_seconds == 30.0
    assert settings.telemetry_enabled is False


def test_env_overrides_and_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BACKEND_BASE_URL", "https://pof.example.com")
    monkeypatch.setenv("poll_interval_seconds", "1.5")
    settings = get_settings()
    assert settings.backend_base_url == "https://pof.example.com"
    assert settings.poll_interval_seconds == 1.5
    assert get_settings() is settings


@pytest.mark.parametrize(
    ("env", "message"),
    [
        ({"BACKEND_BASE_URL": "localhost:3030"}, "http"),
        ({"POLL_INTERVAL_SECONDS": "0"}, "poll_interval_seconds"),
        ({"REQUEST_TIMEOUT_SECONDS": "-1"}, "request_timeout_seconds"),
        ({"TELEMETRY_SAMPLE_RATE": "1.5"}, "telemetry_sample_rate"),
        ({"TELEMETRY_EXPORTER": "jaeger"}, "telemetry_exporter"),
        ({"TELEMETRY_EXPORTER": "otlp"}, "TELEMETRY_OTLP_ENDPOINT"),
    ],
)
def test_invalid_values_rejected(
    monkeypatch: pytest.MonkeyPatch, env: dict[str, str], message: str
) -> None:
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError, match=message):
        Settings()
