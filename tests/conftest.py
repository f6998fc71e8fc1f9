"""Shared fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from assetrelease.core import AssetReleaseConfig, LocalFile, RemoteObject

CACHE_CONTROL = "public,max-age=1"


@pytest.fixture
def make_config():
    def _make(**overrides) -> AssetReleaseConfig:
        values = {
            "bucket": "assets",
            "release": 20,
            "keep": 10,
            "cache_control": CACHE_CONTROL,
            "clean": False,
            "deploy": False,
            "dry_run": False,
            "force": False,
        }
        values.update(overrides)
        return AssetReleaseConfig(**values)

    return _make


@pytest.fixture
def local_file():
    def _make(key: str, content_type: str | None = None, content_encoding: str | None = None):
        return LocalFile(
            key=key,
            path=Path("/build") / key,
            content_type=content_type,
            content_encoding=content_encoding,
        )

    return _make


@pytest.fixture
def remote_object():
    def _make(
        key: str,
        release: int | str | None = 20,
        cache_control: str | None = CACHE_CONTROL,
        content_type: str | None = None,
        content_encoding: str | None = None,
        **metadata: str,
    ) -> RemoteObject:
        if release is not None:
            metadata["release"] = str(release)
        return RemoteObject(
            key=key,
            cache_control=cache_control,
            content_type=content_type,
            content_encoding=content_encoding,
            metadata=metadata,
        )

    return _make


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def storage() -> MagicMock:
    mock = MagicMock()
    mock.list.return_value = []
    mock.head.return_value = None
    return mock
