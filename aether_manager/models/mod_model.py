# aether_manager/models/mod_model.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


def _str_field(data: dict, key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _optional_str_field(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string or null, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Mod:
    """
    A single installed mod. Immutable; changes go through dataclasses.replace
    and are committed by rewriting the whole mods.json document.

    file_path points at the canonical copy inside the private storage root.
    original_name is the name the mod gets inside the external active folder.
    """

    id: str
    title: str
    is_active: bool
    date_added: str
    file_path: str
    original_name: str
    description: str | None = None
    thumbnail: str | None = None
    character: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "thumbnail": self.thumbnail,
            "is_active": self.is_active,
            "date_added": self.date_added,
            "character": self.character,
            "file_path": self.file_path,
            "original_name": self.original_name,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Mod":
        """Raises KeyError/TypeError when the record is malformed."""
        if not isinstance(data, dict):
            raise TypeError(f"Mod record must be an object, got {type(data).__name__}")
        is_active = data["is_active"]
        if not isinstance(is_active, bool):
            raise TypeError("'is_active' must be a boolean")
        return cls(
            id=_str_field(data, "id"),
            title=_str_field(data, "title"),
            is_active=is_active,
            date_added=_str_field(data, "date_added"),
            file_path=_str_field(data, "file_path"),
            original_name=_str_field(data, "original_name"),
            description=_optional_str_field(data, "description"),
            thumbnail=_optional_str_field(data, "thumbnail"),
            character=_optional_str_field(data, "character"),
        )


@dataclass(frozen=True)
class ModStats:
    installed: int = 0
    active: int = 0
    inactive: int = 0
    presets: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "installedMods": self.installed,
            "activeMods": self.active,
            "inactiveMods": self.inactive,
            "presets": self.presets,
        }


@dataclass(frozen=True)
class CharacterSummary:
    """Per-character counts shown on the characters overview."""

    id: str
    name: str
    installed_mods: int = 0
    active_mods: int = 0


@dataclass(frozen=True)
class DriftEntry:
    mod_id: str
    title: str
    recorded_active: bool
    present_on_disk: bool


@dataclass(frozen=True)
class DriftReport:
    """Mismatches between mods.json and the file system. Purely informational."""

    active_dir: str
    mismatched: list[DriftEntry] = field(default_factory=list)
    missing_canonical: list[str] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return not self.mismatched and not self.missing_canonical
