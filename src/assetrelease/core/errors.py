"""Core exceptions."""


class AssetReleaseError(Exception):
    """Base exception for AssetRelease."""


class ConfigError(AssetReleaseError):
    """Invalid or incomplete configuration."""


class SourceError(AssetReleaseError):
    """Local source directory cannot be scanned."""


class StorageError(AssetReleaseError):
    """Object store request failed."""

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key
