"""Adapters for the storage and logger ports."""

from .logger_std import StdLoggerAdapter
from .storage_s3 import S3StorageAdapter

__all__ = [
    "S3StorageAdapter",
    "StdLoggerAdapter",
]
