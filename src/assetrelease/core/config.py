"""Centralized configuration for AssetRelease."""

import os
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigError

DEFAULT_CACHE_CONTROL = "public,immutable,max-age=31536000"


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


@dataclass(slots=True)
class AssetReleaseConfig:
    """All AssetRelease configuration in one place.

    Environment variables (all optional):
        BUILD_NUMBER:     Default release number, ignored unless an integer.
        AR_LOG_LEVEL:     Logging level. Default "INFO".
        AR_MAX_WORKERS:   Thread pool size for HEAD requests and plan execution.
                          Default 8.
        AR_ENDPOINT_URL:  S3-compatible endpoint (MinIO, SeaweedFS, ...).
    """

    bucket: str = ""
    source: str = "."
    pattern: str = "**/*"
    release: int = 0
    keep: int = 10
    acl: str = "public-read"
    cache_control: str = DEFAULT_CACHE_CONTROL
    clean: bool = True
    deploy: bool = True
    dry_run: bool = False
    force: bool = False
    max_workers: int = 8
    log_level: str = "INFO"

    # Connection params (typically passed by CLI, not env vars)
    endpoint_url: str | None = field(default=None, repr=False)
    region: str | None = None
    profile: str | None = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "AssetReleaseConfig":
        """Build config from environment variables + explicit overrides.

        Overrides that are None fall back to the environment or the defaults.
        """
        values: dict[str, Any] = {
            "release": _env_int("BUILD_NUMBER", 0),
            "log_level": os.environ.get("AR_LOG_LEVEL", "INFO"),
            "max_workers": _env_int("AR_MAX_WORKERS", 8),
            "endpoint_url": os.environ.get("AR_ENDPOINT_URL") or None,
        }
        values.update({name: value for name, value in overrides.items() if value is not None})
        return cls(**values)

    def validate(self) -> None:
        """Raise ConfigError when the configuration cannot drive a deploy."""
        if self.release < 1:
            raise ConfigError("Release number is required and must be > 0.")
        if not self.bucket:
            raise ConfigError("Bucket name required")
        if self.keep < 0:
            raise ConfigError(f"Keep must be >= 0, got {self.keep}")
        if self.max_workers < 1:
            raise ConfigError(f"Worker count must be >= 1, got {self.max_workers}")
