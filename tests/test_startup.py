"""Unit tests for startup config logging."""

from payqr.common.startup import log_startup_config


def test_startup_config_redacts_secrets(monkeypatch):
    """Secret-looking keys are masked; plain settings and unset keys are shown."""

    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("OTEL_EXPORTER_OTLP_HEADERS", "authorization=Bearer abc")
    monkeypatch.delenv("CORS_ALLOW_ORIGIN", raising=False)

    config = log_startup_config("payqr-encoder", ["LOG_LEVEL", "OTEL_EXPORTER_OTLP_HEADERS", "CORS_ALLOW_ORIGIN"])

    assert config["service"] == "payqr-encoder"
    assert config["version"]
    assert config["LOG_LEVEL"] == "DEBUG"
    assert config["OTEL_EXPORTER_OTLP_HEADERS"] == "<redacted>"
    assert config["CORS_ALLOW_ORIGIN"] == "<unset>"
