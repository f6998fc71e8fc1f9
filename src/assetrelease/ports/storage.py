"""Storage port interface."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol


@dataclass
class ObjectHead:
    """S3 object metadata."""

    key: str
    size: int = 0
    etag: str = ""
    cache_control: str | None = None
    content_type: str | None = None
    content_encoding: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)


class StoragePort(Protocol):
    """Port for object store operations.

    Keys are addressed as ``"bucket/key"``.
    """

    def list(self, prefix: str) -> Iterator[ObjectHead]:
        """List objects under ``bucket[/prefix]`` (key and size only)."""
        ...

    def head(self, key: str) -> ObjectHead | None:
        """Get object metadata, None when the object does not exist."""
        ...

    def upload(
        self,
        key: str,
        path: Path,
        *,
        acl: str,
        cache_control: str,
        content_type: str | None,
        content_encoding: str | None,
        metadata: dict[str, str],
    ) -> None:
        """Upload a local file."""
        ...

    def copy_in_place(
        self,
        key: str,
        *,
        acl: str,
        cache_control: str | None,
        content_type: str | None,
        content_encoding: str | None,
        metadata: dict[str, str],
    ) -> None:
        """Replace an object's metadata with a server-side self copy."""
        ...

    def delete(self, key: str) -> None:
        """Delete an object."""
        ...
