# aether_manager/services/database_service.py
import threading
from pathlib import Path
from typing import Callable, TypeVar

from aether_manager.core.exceptions import StorageCorruptionError
from aether_manager.models.mod_model import Mod
from aether_manager.models.preset_model import Preset
from aether_manager.services.config_service import ConfigService
from aether_manager.utils.file_utils import FileUtils
from aether_manager.utils.logger_utils import logger

T = TypeVar("T", Mod, Preset)


class DatabaseService:
    """
    Owns mods.json and presets.json. Each document is one JSON array holding
    the complete collection, so every change is a load -> modify -> save of
    the whole array. There is no cache: every call reads from disk.

    A missing document is an empty collection. A document that exists but
    does not parse raises StorageCorruptionError and is never overwritten here.
    """

    def __init__(self, config_service: ConfigService):
        # --- Service Setup ---
        self.config_service = config_service
        # Held by every mutating operation for its full read-modify-write.
        self.lock = threading.RLock()

    # --- Generic document helpers ---
    def _load_collection(self, path: Path, parse: Callable[[dict], T], label: str) -> list[T]:
        if not path.exists():
            return []
        data = FileUtils.read_json(path)
        if not isinstance(data, list):
            raise StorageCorruptionError(
                f"Failed to parse {label} database: expected a list, got {type(data).__name__}"
            )

        records = []
        seen_ids = set()
        for index, raw in enumerate(data):
            try:
                record = parse(raw)
            except (KeyError, TypeError, ValueError) as e:
                raise StorageCorruptionError(
                    f"Failed to parse {label} database: record #{index} is malformed ({e!r})"
                ) from e
            if record.id in seen_ids:
                raise StorageCorruptionError(
                    f"Failed to parse {label} database: duplicate id '{record.id}'"
                )
            seen_ids.add(record.id)
            records.append(record)
        return records

    def _save_collection(self, path: Path, records: list, label: str):
        logger.debug(f"Saving {len(records)} {label} record(s) to {path}")
        FileUtils.write_json_atomic(path, [r.to_dict() for r in records])

    # --- Mods ---
    def load_mods(self) -> list[Mod]:
        return self._load_collection(self.config_service.mods_db_path, Mod.from_dict, "mods")

    def save_mods(self, mods: list[Mod]):
        self._save_collection(self.config_service.mods_db_path, mods, "mods")

    def get_mod(self, mod_id: str) -> Mod | None:
        return next((m for m in self.load_mods() if m.id == mod_id), None)

    def upsert_mod(self, mod: Mod):
        """Replaces the record with the same id, or appends it."""
        with self.lock:
            mods = self.load_mods()
            for index, existing in enumerate(mods):
                if existing.id == mod.id:
                    mods[index] = mod
                    break
            else:
                mods.append(mod)
            self.save_mods(mods)

    def remove_mod(self, mod_id: str) -> bool:
        """Idempotent. Returns whether a record was actually removed."""
        with self.lock:
            mods = self.load_mods()
            remaining = [m for m in mods if m.id != mod_id]
            self.save_mods(remaining)
            return len(remaining) != len(mods)

    # --- Presets ---
    def load_presets(self) -> list[Preset]:
        return self._load_collection(
            self.config_service.presets_db_path, Preset.from_dict, "presets"
        )

    def save_presets(self, presets: list[Preset]):
        self._save_collection(self.config_service.presets_db_path, presets, "presets")

    def get_preset(self, preset_id: str) -> Preset | None:
        return next((p for p in self.load_presets() if p.id == preset_id), None)
