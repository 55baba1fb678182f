"""Startup-time helpers for safe config logging."""

import os
from importlib.metadata import PackageNotFoundError, version

from payqr.common.logging import logger

# OTEL_EXPORTER_OTLP_HEADERS usually carries a collector auth token.
SECRET_MARKERS = ("KEY", "SECRET", "PASSWORD", "TOKEN", "HEADERS")


def _safe_env(name: str) -> str:
    """Return env value with simple redaction for secret-like variable names."""

    value = os.getenv(name)
    if value is None:
        return "<unset>"
    if any(marker in name for marker in SECRET_MARKERS):
        return "<redacted>"
    return value


def package_version() -> str:
    """Installed `payqr` version, or `<source>` when running from a checkout."""

    try:
        return version("payqr")
    except PackageNotFoundError:
        return "<source>"


def log_startup_config(service_name: str, keys: list[str]) -> dict[str, str]:
    """Log selected startup config keys for quick troubleshooting."""

    config = {"service": service_name, "version": package_version()}
    for key in keys:
        config[key] = _safe_env(key)
    logger.info("startup_config=%s", config)
    return config
