"""Port interfaces."""

from .logger import LoggerPort
from .storage import ObjectHead, StoragePort

__all__ = [
    "LoggerPort",
    "ObjectHead",
    "StoragePort",
]
