from .config_service import ConfigService, ConfigSaveError, resolve_config_root
from .database_service import DatabaseService
from .mod_service import ModService
from .preset_service import PresetService
from .stats_service import StatsService
from .command_service import CommandService

__all__ = [
    "ConfigService",
    "ConfigSaveError",
    "resolve_config_root",
    "DatabaseService",
    "ModService",
    "PresetService",
    "StatsService",
    "CommandService",
]
