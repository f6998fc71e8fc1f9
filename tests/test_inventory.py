"""Tests for the local and remote inventory builders."""

import pytest

from assetrelease.core import RemoteObject, SourceError, StorageError, scan_local, scan_remote
from assetrelease.ports import ObjectHead


@pytest.fixture
def build_dir(tmp_path):
    (tmp_path / "css").mkdir()
    (tmp_path / "css" / "site.css").write_text("body{}")
    (tmp_path / "css" / "site.css.gz").write_bytes(b"\x1f\x8b")
    (tmp_path / "index.html").write_text("<html></html>")
    (tmp_path / "LICENSE").write_text("MIT")
    (tmp_path / "empty").mkdir()
    return tmp_path


class TestScanLocal:
    def test_collects_files_with_relative_keys(self, build_dir):
        files = scan_local(build_dir)
        assert sorted(files) == ["LICENSE", "css/site.css", "css/site.css.gz", "index.html"]

    def test_infers_headers(self, build_dir):
        files = scan_local(build_dir)

        assert files["css/site.css"].content_type == "text/css"
        assert files["css/site.css"].content_encoding is None
        assert files["css/site.css.gz"].content_type == "text/css"
        assert files["css/site.css.gz"].content_encoding == "gzip"
        assert files["LICENSE"].content_type is None

    def test_paths_point_at_files(self, build_dir):
        files = scan_local(build_dir)
        assert files["index.html"].path.read_text() == "<html></html>"

    def test_pattern_filters_files(self, build_dir):
        files = scan_local(build_dir, "css/*")
        assert sorted(files) == ["css/site.css", "css/site.css.gz"]

    def test_missing_source(self, tmp_path):
        with pytest.raises(SourceError):
            scan_local(tmp_path / "missing")

    def test_empty_source(self, tmp_path):
        assert scan_local(tmp_path) == {}


class TestScanRemote:
    def test_snapshots_objects_with_metadata(self, storage, logger):
        storage.list.return_value = [ObjectHead(key="a.js"), ObjectHead(key="b.css")]
        heads = {
            "assets/a.js": ObjectHead(
                key="a.js",
                cache_control="public",
                content_type="text/javascript",
                metadata={"release": "3"},
            ),
            "assets/b.css": ObjectHead(key="b.css", content_encoding="br"),
        }
        storage.head.side_effect = heads.get

        objects = scan_remote(storage, "assets", logger, max_workers=2)

        storage.list.assert_called_once_with("assets")
        assert objects == {
            "a.js": RemoteObject(
                key="a.js",
                cache_control="public",
                content_type="text/javascript",
                metadata={"release": "3"},
            ),
            "b.css": RemoteObject(key="b.css", content_encoding="br"),
        }
        assert objects["a.js"].release == 3

    def test_empty_bucket(self, storage, logger):
        assert scan_remote(storage, "assets", logger) == {}
        storage.head.assert_not_called()

    def test_unreadable_objects_are_left_out(self, storage, logger):
        storage.list.return_value = [
            ObjectHead(key="ok.js"),
            ObjectHead(key="gone.js"),
            ObjectHead(key="denied.js"),
        ]

        def head(key):
            if key == "assets/ok.js":
                return ObjectHead(key="ok.js", metadata={"release": "1"})
            if key == "assets/denied.js":
                raise StorageError("Access Denied", key="denied.js")
            return None

        storage.head.side_effect = head

        objects = scan_remote(storage, "assets", logger)

        assert list(objects) == ["ok.js"]
        assert logger.warning.call_count == 2

    def test_listing_failure_propagates(self, storage, logger):
        storage.list.side_effect = StorageError("no such bucket")
        with pytest.raises(StorageError):
            scan_remote(storage, "assets", logger)
