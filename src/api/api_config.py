# This file defines runtime settings for the GCD web service in one place.
# It exists so the listen address, computation path, and body limits can change without code edits.
# The config loader reads `.env` plus environment variables and falls back to local-development defaults.
# Validators reject unusable ports, paths, and log levels before the server starts.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_MAX_FORM_BYTES = 16 * 1024
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ApiConfig(BaseModel):
    """Typed service runtime configuration."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    api_name: str = "GCD Calculator"
    host: str = "127.0.0.1"
    port: int = 3000
    environment: str = "local"
    log_level: str = "INFO"
    computation_path: str = "/gcd"
    max_form_bytes: int = DEFAULT_MAX_FORM_BYTES
    enable_request_logging: bool = True
    app_version: str = "0.1.0"

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("port must be between 1 and 65535.")
        return value

    @field_validator("computation_path")
    @classmethod
    def validate_computation_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("computation_path must start with '/'.")
        cleaned = value.rstrip("/")
        if not cleaned:
            raise ValueError("computation_path must not be the form page path '/'.")
        return cleaned

    @field_validator("max_form_bytes")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized

    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on"}:
        return True
    if value in {"0", "false", "no", "n", "off"}:
        return False
    raise ValueError(f"{name} must be boolean-like, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def load_api_config(*, load_env: bool = True) -> ApiConfig:
    """Load service configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    try:
        config_values: dict[str, object] = {
            "api_name": os.getenv("GCD_API_NAME", "GCD Calculator"),
            "host": os.getenv("GCD_HOST", "127.0.0.1"),
            "port": _env_int("GCD_PORT", 3000),
            "environment": os.getenv("ENV", "local"),
            "log_level": os.getenv("LOG_LEVEL", "INFO"),
            "computation_path": os.getenv("GCD_COMPUTATION_PATH", "/gcd"),
            "max_form_bytes": _env_int("GCD_MAX_FORM_BYTES", DEFAULT_MAX_FORM_BYTES),
            "enable_request_logging": _env_bool("GCD_ENABLE_REQUEST_LOGGING", True),
            "app_version": os.getenv("APP_VERSION", "0.1.0"),
        }
        return ApiConfig.model_validate(config_values)
    except (ValueError, ValidationError) as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc


@lru_cache(maxsize=1)
def get_api_config() -> ApiConfig:
    """Cached accessor for service config."""

    return load_api_config()
