from .mod_model import Mod, ModStats, CharacterSummary, DriftEntry, DriftReport
from .preset_model import Preset
from .config_model import AppSettings

__all__ = [
    "Mod",
    "ModStats",
    "CharacterSummary",
    "DriftEntry",
    "DriftReport",
    "Preset",
    "AppSettings",
]
