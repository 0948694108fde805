"""Record (de)serialization."""

import pytest

from aether_manager.models import AppSettings, Mod, ModStats, Preset


class TestMod:
    def test_optional_fields_default_to_none(self):
        mod = Mod.from_dict(
            {
                "id": "1",
                "title": "t",
                "is_active": True,
                "date_added": "2026-01-01T00:00:00+00:00",
                "file_path": "/x/Foo",
                "original_name": "Foo",
            }
        )
        assert mod.description is None
        assert mod.thumbnail is None
        assert mod.character is None
        assert Mod.from_dict(mod.to_dict()) == mod

    def test_is_active_must_be_bool(self):
        with pytest.raises(TypeError):
            Mod.from_dict(
                {
                    "id": "1",
                    "title": "t",
                    "is_active": "yes",
                    "date_added": "d",
                    "file_path": "/x",
                    "original_name": "x",
                }
            )


class TestPreset:
    def test_mod_ids_must_be_strings(self):
        with pytest.raises(TypeError):
            Preset.from_dict(
                {"id": "p", "name": "n", "created_at": "c", "updated_at": "u", "mod_ids": [1]}
            )


class TestStatsAndSettings:
    def test_recycle_flag_must_be_bool(self):
        with pytest.raises(TypeError):
            AppSettings.from_dict({"zzmi_mods_path": None, "delete_to_recycle_bin": "false"})

    def test_stats_wire_names(self):
        assert ModStats(3, 1, 2, 2).to_dict() == {
            "installedMods": 3,
            "activeMods": 1,
            "inactiveMods": 2,
            "presets": 2,
        }

    def test_settings_active_dir(self, tmp_path):
        assert AppSettings().active_dir is None
        assert AppSettings(zzmi_mods_path=str(tmp_path)).active_dir == tmp_path
