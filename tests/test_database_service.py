"""mods.json / presets.json load-modify-save semantics."""

import json

import pytest

from aether_manager.core.exceptions import StorageCorruptionError
from aether_manager.models.mod_model import Mod
from aether_manager.models.preset_model import Preset
from aether_manager.services.config_service import ConfigService
from aether_manager.services.database_service import DatabaseService


def _mod(mod_id: str, **overrides) -> Mod:
    fields = dict(
        id=mod_id,
        title=f"Mod {mod_id}",
        is_active=False,
        date_added="2026-01-01T00:00:00+00:00",
        file_path=f"/store/othermods/{mod_id}",
        original_name=mod_id,
    )
    fields.update(overrides)
    return Mod(**fields)


@pytest.fixture
def db(config_root):
    return DatabaseService(ConfigService(config_root))


class TestMods:
    def test_missing_document_is_empty(self, db):
        assert db.load_mods() == []

    def test_upsert_appends_then_replaces(self, db):
        db.upsert_mod(_mod("a"))
        db.upsert_mod(_mod("b"))
        db.upsert_mod(_mod("a", title="Renamed"))

        mods = db.load_mods()
        assert [m.id for m in mods] == ["a", "b"]
        assert mods[0].title == "Renamed"

    def test_remove_is_idempotent(self, db):
        db.upsert_mod(_mod("a"))
        assert db.remove_mod("a") is True
        assert db.remove_mod("a") is False
        assert db.load_mods() == []

    def test_document_is_plain_json_array(self, db, config_root):
        db.upsert_mod(_mod("a", character="alice", description=None))

        data = json.loads((config_root / "mods" / "mods.json").read_text(encoding="utf-8"))
        assert isinstance(data, list)
        assert data[0]["original_name"] == "a"
        assert data[0]["character"] == "alice"
        assert data[0]["is_active"] is False

    def test_get_mod(self, db):
        db.upsert_mod(_mod("a"))
        assert db.get_mod("a").title == "Mod a"
        assert db.get_mod("zzz") is None


class TestCorruption:
    def _write(self, config_root, content: str):
        path = config_root / "mods" / "mods.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")

    def test_invalid_syntax(self, db, config_root):
        self._write(config_root, "[{\"id\": ")
        with pytest.raises(StorageCorruptionError):
            db.load_mods()

    def test_not_a_list(self, db, config_root):
        self._write(config_root, "{}")
        with pytest.raises(StorageCorruptionError):
            db.load_mods()

    def test_null_document(self, db, config_root):
        self._write(config_root, "null")
        with pytest.raises(StorageCorruptionError):
            db.load_mods()
        with pytest.raises(StorageCorruptionError):
            db.upsert_mod(_mod("a"))
        assert (config_root / "mods" / "mods.json").read_text(encoding="utf-8") == "null"

    def test_null_presets_document(self, db, config_root):
        path = config_root / "mods" / "presets.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("null", encoding="utf-8")
        with pytest.raises(StorageCorruptionError):
            db.load_presets()

    def test_missing_required_field(self, db, config_root):
        self._write(config_root, json.dumps([{"id": "a", "title": "x"}]))
        with pytest.raises(StorageCorruptionError):
            db.load_mods()

    def test_duplicate_ids(self, db, config_root):
        record = _mod("a").to_dict()
        self._write(config_root, json.dumps([record, record]))
        with pytest.raises(StorageCorruptionError):
            db.load_mods()

    def test_corrupt_document_is_not_overwritten(self, db, config_root):
        self._write(config_root, "garbage")
        with pytest.raises(StorageCorruptionError):
            db.upsert_mod(_mod("a"))
        assert (config_root / "mods" / "mods.json").read_text(encoding="utf-8") == "garbage"


class TestPresets:
    def test_round_trip(self, db):
        preset = Preset(
            id="p1",
            name="Evening",
            created_at="2026-01-01T00:00:00+00:00",
            updated_at="2026-01-01T00:00:00+00:00",
            mod_ids=["a", "b"],
        )
        db.save_presets([preset])
        assert db.load_presets() == [preset]
        assert db.get_preset("p1") == preset
        assert db.get_preset("p2") is None
