# aether_manager/utils/file_utils.py
import json
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

from aether_manager.core.constants import JSON_INDENT
from aether_manager.core.exceptions import FilesystemError, StorageCorruptionError
from aether_manager.utils.logger_utils import logger


class FileUtils:
    """
    Tree-level copy/remove and whole-document JSON I/O.
    A single tree is the unit every activation/deactivation works on. A failure
    halfway through a tree is surfaced as FilesystemError; nothing already
    copied or removed is rolled back.
    """

    @staticmethod
    def copy_tree(src: Path, dst: Path):
        """Copies a folder with all its contents, or a single file, to dst."""
        src, dst = Path(src), Path(dst)
        logger.debug(f"Copying '{src}' -> '{dst}'")
        try:
            if src.is_dir():
                shutil.copytree(src, dst, dirs_exist_ok=True)
            elif src.exists():
                dst.parent.mkdir(parents=True, exist_ok=True)
                shutil.copy2(src, dst)
            else:
                raise FileNotFoundError(f"Source does not exist: {src}")
        except OSError as e:
            raise FilesystemError(f"Failed to copy '{src}' to '{dst}': {e}") from e

    @staticmethod
    def remove_tree(path: Path) -> bool:
        """
        Deletes a folder recursively, or a single file.
        Returns False when nothing existed at path (already satisfied).
        """
        path = Path(path)
        try:
            if path.is_dir() and not path.is_symlink():
                logger.debug(f"Removing folder '{path}'")
                shutil.rmtree(path)
            elif path.exists() or path.is_symlink():
                logger.debug(f"Removing file '{path}'")
                path.unlink()
            else:
                return False
        except FileNotFoundError:
            return False
        except OSError as e:
            raise FilesystemError(f"Failed to remove '{path}': {e}") from e
        return True

    @staticmethod
    def ensure_dir(path: Path) -> Path:
        try:
            Path(path).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Failed to create directory '{path}': {e}") from e
        return Path(path)

    @staticmethod
    def read_json(json_path: Path) -> Any | None:
        """
        Reads a JSON document. Returns None if the file does not exist.
        A file that exists but does not parse raises StorageCorruptionError.
        """
        json_path = Path(json_path)
        if not json_path.exists():
            return None
        try:
            with open(json_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse '{json_path}': {e}")
            raise StorageCorruptionError(f"Failed to parse '{json_path.name}': {e}") from e
        except UnicodeDecodeError as e:
            logger.error(f"'{json_path}' is not valid UTF-8: {e}")
            raise StorageCorruptionError(f"Failed to parse '{json_path.name}': {e}") from e
        except OSError as e:
            raise FilesystemError(f"Failed to read '{json_path}': {e}") from e

    @staticmethod
    def write_json_atomic(json_path: Path, data: Any):
        """
        Writes the whole document to a temp file next to the target, then
        replaces the target. Readers see either the old or the new document.
        """
        json_path = Path(json_path)
        logger.debug(f"Writing {json_path}...")
        tmp_name = None
        try:
            json_path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=json_path.parent,
                prefix=f".{json_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(data, tmp, indent=JSON_INDENT, ensure_ascii=False)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, json_path)
            tmp_name = None
        except OSError as e:
            raise FilesystemError(f"Failed to write '{json_path}': {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
