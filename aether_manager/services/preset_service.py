# aether_manager/services/preset_service.py
import dataclasses
import uuid
from datetime import datetime, timezone

from aether_manager.core.exceptions import FilesystemError, NotFoundError
from aether_manager.core.results import service_operation
from aether_manager.core.signals import global_signals
from aether_manager.models.preset_model import Preset
from aether_manager.services.config_service import ConfigService
from aether_manager.services.database_service import DatabaseService
from aether_manager.services.mod_service import ModService
from aether_manager.utils.logger_utils import logger


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _unique(ids) -> list[str]:
    """Drops duplicate ids, keeping first occurrence order."""
    return list(dict.fromkeys(ids))


class PresetService:
    """
    Stores presets and reconciles the active folder against one of them.
    Presets are not checked against the mod collection: unknown ids are kept
    on save and skipped (with a warning) when the preset is applied.
    """

    def __init__(
        self,
        database_service: DatabaseService,
        config_service: ConfigService,
        mod_service: ModService,
    ):
        # --- Injected Services ---
        self.database_service = database_service
        self.config_service = config_service
        self.mod_service = mod_service

    # --- CRUD ---
    @service_operation("list presets")
    def list_presets(self) -> list[Preset]:
        return self.database_service.load_presets()

    @service_operation("get preset")
    def get_preset(self, preset_id: str) -> Preset:
        preset = self.database_service.get_preset(preset_id)
        if preset is None:
            raise NotFoundError("Preset not found")
        return preset

    @service_operation("create preset")
    def create_preset(self, name: str | None = None, mod_ids: list[str] | None = None) -> Preset:
        """
        Without mod_ids the preset snapshots the currently active mods.
        A blank name falls back to the current local date and time.
        """
        with self.database_service.lock:
            if mod_ids is None:
                mod_ids = [m.id for m in self.database_service.load_mods() if m.is_active]

            if not name or not name.strip():
                name = datetime.now().strftime("%Y-%m-%d %H:%M:%S")

            now = _now_iso()
            preset = Preset(
                id=str(uuid.uuid4()),
                name=name.strip(),
                created_at=now,
                updated_at=now,
                mod_ids=_unique(mod_ids),
            )
            presets = self.database_service.load_presets()
            presets.append(preset)
            self.database_service.save_presets(presets)

        logger.info(f"Created preset '{preset.name}' with {len(preset.mod_ids)} mod(s).")
        global_signals.presets_changed.emit()
        return preset

    @service_operation("update preset")
    def update_preset(self, preset_id: str, name: str, mod_ids: list[str]) -> Preset:
        """Full overwrite of name and mod set."""
        with self.database_service.lock:
            presets = self.database_service.load_presets()
            for index, preset in enumerate(presets):
                if preset.id == preset_id:
                    break
            else:
                raise NotFoundError("Preset not found")

            presets[index] = dataclasses.replace(
                preset, name=name, mod_ids=_unique(mod_ids), updated_at=_now_iso()
            )
            self.database_service.save_presets(presets)

        logger.info(f"Updated preset '{name}' ({preset_id}).")
        global_signals.presets_changed.emit()
        return presets[index]

    @service_operation("delete preset")
    def delete_preset(self, preset_id: str):
        with self.database_service.lock:
            presets = self.database_service.load_presets()
            remaining = [p for p in presets if p.id != preset_id]
            if len(remaining) == len(presets):
                raise NotFoundError("Preset not found")
            self.database_service.save_presets(remaining)

        logger.info(f"Deleted preset {preset_id}.")
        global_signals.presets_changed.emit()

    # --- Reconciliation ---
    @service_operation("apply preset")
    def apply_preset(self, preset_id: str) -> dict:
        """
        Makes the active set equal to the preset's mods that still exist.
        Only mods in the symmetric difference are touched. mods.json is saved
        once at the end; if a file operation fails midway, the mods already
        switched are saved before the error is reported.
        """
        with self.database_service.lock:
            preset = self.database_service.get_preset(preset_id)
            if preset is None:
                raise NotFoundError("Preset not found")

            mods = self.database_service.load_mods()
            desired = set(preset.mod_ids)
            settings = self.config_service.load_settings()
            active_dir = self.config_service.require_active_dir(settings)

            known_ids = {m.id for m in mods}
            skipped_ids = [mod_id for mod_id in preset.mod_ids if mod_id not in known_ids]
            if skipped_ids:
                logger.warning(
                    f"Preset '{preset.name}' references {len(skipped_ids)} missing mod(s): {skipped_ids}"
                )

            logger.info(f"Applying preset '{preset.name}' to {active_dir}")
            activated: list[str] = []
            deactivated: list[str] = []
            try:
                for index, mod in enumerate(mods):
                    should_be_active = mod.id in desired
                    if should_be_active and not mod.is_active:
                        self.mod_service.place_in_active_dir(mod, active_dir)
                        mods[index] = dataclasses.replace(mod, is_active=True)
                        activated.append(mod.id)
                    elif not should_be_active and mod.is_active:
                        self.mod_service.remove_from_active_dir(mod, active_dir)
                        mods[index] = dataclasses.replace(mod, is_active=False)
                        deactivated.append(mod.id)
            except FilesystemError:
                logger.error(
                    f"Preset '{preset.name}' stopped midway: "
                    f"{len(activated)} activated, {len(deactivated)} deactivated so far."
                )
                self.database_service.save_mods(mods)
                global_signals.mods_changed.emit()
                raise

            self.database_service.save_mods(mods)

        logger.info(
            f"Preset '{preset.name}' applied: +{len(activated)} / -{len(deactivated)}"
        )
        global_signals.mods_changed.emit()
        return {
            "activated": activated,
            "deactivated": deactivated,
            "skipped_ids": skipped_ids,
        }
