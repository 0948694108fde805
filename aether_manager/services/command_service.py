# aether_manager/services/command_service.py
from typing import Any, Callable

from PyQt6.QtCore import QThreadPool

from aether_manager.core.exceptions import ValidationError
from aether_manager.core.results import failure, service_operation
from aether_manager.core.signals import global_signals
from aether_manager.models.config_model import AppSettings
from aether_manager.services.config_service import ConfigService
from aether_manager.services.database_service import DatabaseService
from aether_manager.services.mod_service import ModService
from aether_manager.services.preset_service import PresetService
from aether_manager.services.stats_service import StatsService
from aether_manager.utils.async_utils import Worker
from aether_manager.utils.logger_utils import logger


class CommandService:
    """
    The operation contract a front end talks to. Every command returns a
    result dict ({"success": ..., "data"/"error": ...}) and never raises for
    expected failures. Commands can be called directly, dispatched by name
    with invoke(), or run off the UI thread with submit().
    """

    COMMANDS = (
        "list_mods",
        "get_mod",
        "install_mod",
        "toggle_mod",
        "update_mod",
        "delete_mod",
        "set_mod_thumbnail_from_file",
        "list_mods_by_character",
        "list_other_mods",
        "list_character_summaries",
        "check_active_drift",
        "get_stats",
        "get_settings",
        "update_settings",
        "list_presets",
        "get_preset",
        "create_preset",
        "update_preset",
        "delete_preset",
        "apply_preset",
    )

    def __init__(
        self,
        config_service: ConfigService,
        database_service: DatabaseService,
        mod_service: ModService,
        preset_service: PresetService,
        stats_service: StatsService,
        thread_pool: QThreadPool | None = None,
    ):
        # --- Injected Services ---
        self.config_service = config_service
        self.database_service = database_service
        self.mod_service = mod_service
        self.preset_service = preset_service
        self.stats_service = stats_service
        self._thread_pool = thread_pool

    # --- Mods ---
    def list_mods(self) -> dict:
        return self.mod_service.list_mods()

    def get_mod(self, mod_id: str) -> dict:
        return self.mod_service.get_mod(mod_id)

    def install_mod(self, source_path, title, character=None, description=None, thumbnail=None) -> dict:
        return self.mod_service.install_mod(source_path, title, character, description, thumbnail)

    def toggle_mod(self, mod_id: str) -> dict:
        return self.mod_service.toggle_mod(mod_id)

    def update_mod(self, mod_id: str, title=None, thumbnail=None, description=None) -> dict:
        return self.mod_service.update_mod(mod_id, title=title, thumbnail=thumbnail, description=description)

    def delete_mod(self, mod_id: str) -> dict:
        return self.mod_service.delete_mod(mod_id)

    def set_mod_thumbnail_from_file(self, mod_id: str, image_path) -> dict:
        return self.mod_service.set_mod_thumbnail_from_file(mod_id, image_path)

    def list_mods_by_character(self, character: str) -> dict:
        return self.mod_service.list_mods_by_character(character)

    def list_other_mods(self) -> dict:
        return self.mod_service.list_other_mods()

    def check_active_drift(self) -> dict:
        return self.mod_service.check_active_drift()

    # --- Stats ---
    def get_stats(self) -> dict:
        return self.stats_service.get_stats()

    def list_character_summaries(self) -> dict:
        return self.stats_service.list_character_summaries()

    # --- Settings ---
    @service_operation("get settings")
    def get_settings(self) -> AppSettings:
        return self.config_service.load_settings()

    @service_operation("update settings")
    def update_settings(self, settings: AppSettings | dict) -> AppSettings:
        # Round-trips AppSettings too, normalizing a blank path to None
        data = settings if isinstance(settings, dict) else settings.to_dict()
        try:
            settings = AppSettings.from_dict(data)
        except TypeError as e:
            raise ValidationError(f"Invalid settings: {e}") from e

        with self.database_service.lock:
            self.config_service.save_settings(settings)

        logger.info(f"Settings updated: zzmi_mods_path={settings.zzmi_mods_path}")
        global_signals.settings_changed.emit()
        return settings

    # --- Presets ---
    def list_presets(self) -> dict:
        return self.preset_service.list_presets()

    def get_preset(self, preset_id: str) -> dict:
        return self.preset_service.get_preset(preset_id)

    def create_preset(self, name=None, mod_ids=None) -> dict:
        return self.preset_service.create_preset(name, mod_ids)

    def update_preset(self, preset_id: str, name: str, mod_ids: list[str]) -> dict:
        return self.preset_service.update_preset(preset_id, name, mod_ids)

    def delete_preset(self, preset_id: str) -> dict:
        return self.preset_service.delete_preset(preset_id)

    def apply_preset(self, preset_id: str) -> dict:
        return self.preset_service.apply_preset(preset_id)

    # --- Dispatch ---
    def _resolve(self, command: str) -> Callable[..., dict]:
        if command not in self.COMMANDS:
            raise ValidationError(f"Unknown command: '{command}'")
        return getattr(self, command)

    def invoke(self, command: str, **kwargs: Any) -> dict:
        """Runs a command by name on the calling thread."""
        try:
            handler = self._resolve(command)
        except ValidationError as e:
            logger.error(str(e))
            return failure(str(e), e.kind)
        try:
            return handler(**kwargs)
        except TypeError as e:
            # Wrong keyword arguments for the command
            logger.error(f"Bad arguments for '{command}': {e}")
            return failure(f"Bad arguments for '{command}': {e}", ValidationError.kind)

    def submit(
        self,
        command: str,
        on_result: Callable[[dict], None] | None = None,
        on_error: Callable[[tuple], None] | None = None,
        **kwargs: Any,
    ) -> Worker:
        """
        Runs a command on the thread pool. The store lock serializes it
        against every other mutating command.
        """
        worker = Worker(self.invoke, command, **kwargs)
        if on_result:
            worker.signals.result.connect(on_result)
        if on_error:
            worker.signals.error.connect(on_error)

        thread_pool = self._thread_pool or QThreadPool.globalInstance()
        if thread_pool is None:
            logger.critical("Could not get QThreadPool instance to run command.")
            raise RuntimeError("No thread pool available")
        logger.debug(f"Queueing command '{command}'")
        thread_pool.start(worker)
        return worker
