"""
OpsLog Configuration Management
===============================
Pydantic-based settings for environment variable loading.
"""

import hashlib
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Shortest digest accepted for fingerprints (128 bits).
MIN_DIGEST_BYTES = 16


def validate_hash_algorithm(name: str) -> str:
    """Normalize a hashlib algorithm name, rejecting unknown or short digests."""
    name = name.lower()
    if name not in hashlib.algorithms_available:
        raise ValueError(f"unknown hash algorithm: {name}")
    if hashlib.new(name).digest_size < MIN_DIGEST_BYTES:
        raise ValueError(f"hash algorithm {name} has a digest shorter than 128 bits")
    return name


class OpsLogConfig(BaseSettings):
    """OpsLog configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Stack trace archival. Unset means traces are rendered inline.
    stacktrace_path: Optional[Path] = Field(default=None, validation_alias="OPSLOG_STACKTRACE_PATH")
    fingerprint_algorithm: str = Field(default="sha256", validation_alias="OPSLOG_FINGERPRINT_ALGORITHM")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="OPSLOG_LOG_LEVEL")
    json_logs: bool = Field(default=True, validation_alias="OPSLOG_JSON_LOGS")

    @field_validator("stacktrace_path", mode="before")
    @classmethod
    def _blank_path_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("fingerprint_algorithm")
    @classmethod
    def _check_algorithm(cls, value: str) -> str:
        return validate_hash_algorithm(value)

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return value


# Global config instance
_config: Optional[OpsLogConfig] = None


def get_opslog_config() -> OpsLogConfig:
    """Get or create the global OpsLog configuration."""
    global _config
    if _config is None:
        _config = OpsLogConfig()
    return _config


def reset_opslog_config() -> None:
    """Forget the global configuration so the next access reloads it."""
    global _config
    _config = None
