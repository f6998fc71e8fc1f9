"""Local and remote inventory builders."""

import concurrent.futures
from pathlib import Path

from ..ports import LoggerPort, StoragePort
from .encodings import infer_headers
from .errors import SourceError, StorageError
from .models import LocalFile, RemoteObject


def scan_local(source: str | Path, pattern: str = "**/*") -> dict[str, LocalFile]:
    """Collect the files under ``source`` matching ``pattern``.

    Keys are POSIX paths relative to ``source``.

    Raises:
        SourceError: If ``source`` is not a directory or the pattern is invalid
    """
    root = Path(source).expanduser()
    if not root.is_dir():
        raise SourceError(f"Source directory not found: {root}")

    try:
        matches = sorted(root.glob(pattern))
    except (ValueError, NotImplementedError) as e:
        raise SourceError(f"Invalid pattern {pattern!r}: {e}") from e

    files: dict[str, LocalFile] = {}
    for path in matches:
        if not path.is_file():
            continue
        key = path.relative_to(root).as_posix()
        content_type, content_encoding = infer_headers(path.name)
        files[key] = LocalFile(
            key=key,
            path=path.resolve(),
            content_type=content_type,
            content_encoding=content_encoding,
        )
    return files


def scan_remote(
    storage: StoragePort,
    bucket: str,
    logger: LoggerPort,
    max_workers: int = 8,
) -> dict[str, RemoteObject]:
    """Snapshot every object of ``bucket`` with its metadata.

    Objects whose metadata cannot be read are left out, so a failed HEAD
    can never lead to a delete.

    Raises:
        StorageError: If the bucket cannot be listed
    """
    keys = [obj.key for obj in storage.list(bucket)]
    objects: dict[str, RemoteObject] = {}
    if not keys:
        return objects

    def fetch(key: str) -> RemoteObject | None:
        try:
            head = storage.head(f"{bucket}/{key}")
        except StorageError as e:
            logger.warning("Skipping object, metadata unavailable", key=key, error=str(e))
            return None
        if head is None:
            logger.warning("Skipping object, vanished while listing", key=key)
            return None
        return RemoteObject(
            key=key,
            cache_control=head.cache_control,
            content_type=head.content_type,
            content_encoding=head.content_encoding,
            metadata=dict(head.metadata),
        )

    with concurrent.futures.ThreadPoolExecutor(max_workers=min(max_workers, len(keys))) as executor:
        for obj in executor.map(fetch, keys):
            if obj is not None:
                objects[obj.key] = obj

    return objects
