"""Central environment-driven settings for the encoder service.

The service process loads this once at startup. Behavior is controlled by
environment variables (see `.env.example`).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "payqr-encoder"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    tracing_enabled: bool = False
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    cors_allow_origin: str = "*"
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = CommonSettings()
