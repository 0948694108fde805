# aether_manager/models/config_model.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class AppSettings:
    """Holds the user-configurable settings stored in settings.json. Immutable."""

    # External folder the game's model importer loads active mods from.
    zzmi_mods_path: str | None = None

    # Send deleted canonical copies to the recycle bin instead of erasing them.
    delete_to_recycle_bin: bool = False

    @property
    def active_dir(self) -> Path | None:
        return Path(self.zzmi_mods_path) if self.zzmi_mods_path else None

    def to_dict(self) -> dict[str, Any]:
        return {
            "zzmi_mods_path": self.zzmi_mods_path,
            "delete_to_recycle_bin": self.delete_to_recycle_bin,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        if not isinstance(data, dict):
            raise TypeError(f"Settings must be an object, got {type(data).__name__}")
        path = data.get("zzmi_mods_path")
        if path is not None and not isinstance(path, str):
            raise TypeError("'zzmi_mods_path' must be a string or null")
        if isinstance(path, str) and not path.strip():
            path = None
        recycle = data.get("delete_to_recycle_bin", False)
        if not isinstance(recycle, bool):
            raise TypeError("'delete_to_recycle_bin' must be a boolean")
        return cls(
            zzmi_mods_path=path,
            delete_to_recycle_bin=recycle,
        )
