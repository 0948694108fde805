"""Tree copy/remove and whole-document JSON writes."""

import json
from unittest.mock import patch

import pytest

from aether_manager.core.exceptions import FilesystemError, StorageCorruptionError
from aether_manager.utils.file_utils import FileUtils


class TestCopyTree:
    def test_copies_nested_folder(self, make_mod_source, tmp_path):
        source = make_mod_source("Foo")
        dst = tmp_path / "out" / "Foo"

        FileUtils.copy_tree(source, dst)

        assert (dst / "mod.ini").read_text(encoding="utf-8").startswith("; Foo")
        assert (dst / "textures" / "body.dds").read_bytes() == b"DDS Foo"

    def test_copies_single_file(self, tmp_path):
        src = tmp_path / "single.ini"
        src.write_text("x", encoding="utf-8")
        dst = tmp_path / "deep" / "er" / "single.ini"

        FileUtils.copy_tree(src, dst)

        assert dst.read_text(encoding="utf-8") == "x"

    def test_missing_source_is_filesystem_error(self, tmp_path):
        with pytest.raises(FilesystemError):
            FileUtils.copy_tree(tmp_path / "nope", tmp_path / "dst")


class TestRemoveTree:
    def test_removes_folder(self, make_mod_source):
        source = make_mod_source("Foo")
        assert FileUtils.remove_tree(source) is True
        assert not source.exists()

    def test_removes_file(self, tmp_path):
        f = tmp_path / "a.txt"
        f.write_text("a", encoding="utf-8")
        assert FileUtils.remove_tree(f) is True
        assert not f.exists()

    def test_missing_path_is_noop(self, tmp_path):
        assert FileUtils.remove_tree(tmp_path / "absent") is False


class TestJsonDocuments:
    def test_read_missing_returns_none(self, tmp_path):
        assert FileUtils.read_json(tmp_path / "none.json") is None

    def test_read_invalid_raises_corruption(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{oops", encoding="utf-8")
        with pytest.raises(StorageCorruptionError):
            FileUtils.read_json(path)

    def test_write_is_pretty_printed(self, tmp_path):
        path = tmp_path / "doc.json"
        FileUtils.write_json_atomic(path, [{"id": "1"}])

        text = path.read_text(encoding="utf-8")
        assert json.loads(text) == [{"id": "1"}]
        assert "\n    " in text

    def test_failed_replace_keeps_old_document(self, tmp_path):
        path = tmp_path / "doc.json"
        FileUtils.write_json_atomic(path, ["old"])

        with patch("aether_manager.utils.file_utils.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(FilesystemError):
                FileUtils.write_json_atomic(path, ["new"])

        assert json.loads(path.read_text(encoding="utf-8")) == ["old"]
        assert [p.name for p in tmp_path.iterdir()] == ["doc.json"]
