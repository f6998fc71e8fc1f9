"""Core domain logic."""

from .config import AssetReleaseConfig
from .errors import AssetReleaseError, ConfigError, SourceError, StorageError
from .inventory import scan_local, scan_remote
from .models import (
    Action,
    ExecutionResult,
    LocalFile,
    Plan,
    PlanEntry,
    RemoteObject,
)
from .reconcile import reconcile
from .retention import is_evictable
from .service import DeployService

__all__ = [
    "Action",
    "AssetReleaseConfig",
    "AssetReleaseError",
    "ConfigError",
    "DeployService",
    "ExecutionResult",
    "LocalFile",
    "Plan",
    "PlanEntry",
    "RemoteObject",
    "SourceError",
    "StorageError",
    "is_evictable",
    "reconcile",
    "scan_local",
    "scan_remote",
]
