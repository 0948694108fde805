# aether_manager/models/preset_model.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Preset:
    """A named desired-active-set of mods. mod_ids may reference deleted mods."""

    id: str
    name: str
    created_at: str
    updated_at: str
    mod_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "mod_ids": list(self.mod_ids),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Preset":
        if not isinstance(data, dict):
            raise TypeError(f"Preset record must be an object, got {type(data).__name__}")
        mod_ids = data["mod_ids"]
        if not isinstance(mod_ids, list) or not all(isinstance(m, str) for m in mod_ids):
            raise TypeError("'mod_ids' must be a list of strings")
        for key in ("id", "name", "created_at", "updated_at"):
            if not isinstance(data[key], str):
                raise TypeError(f"'{key}' must be a string")
        return cls(
            id=data["id"],
            name=data["name"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
            mod_ids=list(mod_ids),
        )
