# aether_manager/services/config_service.py
from pathlib import Path

import appdirs

from aether_manager.core.constants import (
    APP_NAME,
    SETTINGS_FILE_NAME,
    STORAGE_DIR_NAME,
    MODS_DB_FILE_NAME,
    PRESETS_DB_FILE_NAME,
    THUMBNAILS_DIR_NAME,
    LOG_DIR_NAME,
)
from aether_manager.core.exceptions import (
    ConfigRootError,
    ConfigurationError,
    FilesystemError,
    StorageCorruptionError,
)
from aether_manager.models.config_model import AppSettings
from aether_manager.utils.file_utils import FileUtils
from aether_manager.utils.logger_utils import logger


class ConfigSaveError(FilesystemError):
    pass


def resolve_config_root() -> Path:
    """Platform config directory for this application, e.g. ~/.config/aether-manager."""
    try:
        config_dir = appdirs.user_config_dir(APP_NAME, False)
    except Exception as e:
        raise ConfigRootError(f"Failed to get app config directory: {e}") from e
    if not config_dir:
        raise ConfigRootError("Failed to get app config directory")
    return Path(config_dir)


class ConfigService:
    """
    Resolves the private storage locations and reads/writes settings.json.
    Settings are re-read on every call; nothing is cached between operations.
    """

    def __init__(self, config_root: Path | None = None):
        # --- Service Setup ---
        self._config_root = Path(config_root) if config_root else resolve_config_root()

    # --- Paths ---
    @property
    def config_root(self) -> Path:
        """The private config directory, created on first access."""
        return FileUtils.ensure_dir(self._config_root)

    @property
    def storage_root(self) -> Path:
        return self.config_root / STORAGE_DIR_NAME

    @property
    def settings_path(self) -> Path:
        return self.config_root / SETTINGS_FILE_NAME

    @property
    def mods_db_path(self) -> Path:
        return self.storage_root / MODS_DB_FILE_NAME

    @property
    def presets_db_path(self) -> Path:
        return self.storage_root / PRESETS_DB_FILE_NAME

    @property
    def thumbnails_dir(self) -> Path:
        return self.storage_root / THUMBNAILS_DIR_NAME

    @property
    def log_dir(self) -> Path:
        return self._config_root / LOG_DIR_NAME

    # --- Settings ---
    def load_settings(self) -> AppSettings:
        """
        Loads settings.json. When the file is absent a default record is
        written and returned, so the first call materializes the file.
        """
        if not self.settings_path.exists():
            logger.warning(
                f"Settings file not found at '{self.settings_path}'. Creating default settings."
            )
            settings = AppSettings()
            self.save_settings(settings)
            return settings

        data = FileUtils.read_json(self.settings_path)
        try:
            return AppSettings.from_dict(data)
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed settings in {SETTINGS_FILE_NAME}: {e}")
            raise StorageCorruptionError(f"Failed to parse settings: {e}") from e

    def save_settings(self, settings: AppSettings):
        """Rewrites settings.json in full."""
        logger.info(f"Saving settings to {self.settings_path}...")
        try:
            FileUtils.write_json_atomic(self.settings_path, settings.to_dict())
        except FilesystemError as e:
            logger.error(f"Failed to write settings: {e}")
            raise ConfigSaveError(f"Failed to write settings: {e}") from e

    def require_active_dir(self, settings: AppSettings) -> Path:
        """
        Returns the configured external active-mods folder, creating it if needed.
        Raises ConfigurationError when no folder is configured.
        """
        active_dir = settings.active_dir
        if active_dir is None:
            raise ConfigurationError(
                "ZZMI mods path not configured. Please set it in settings."
            )
        try:
            active_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemError(f"Failed to create ZZMI mods directory: {e}") from e
        return active_dir
