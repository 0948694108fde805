# aether_manager/services/stats_service.py
from aether_manager.core.constants import KNOWN_CHARACTERS
from aether_manager.core.exceptions import AetherError
from aether_manager.core.results import service_operation
from aether_manager.models.mod_model import CharacterSummary, ModStats
from aether_manager.services.database_service import DatabaseService
from aether_manager.utils.logger_utils import logger


class StatsService:
    """Read-only counts over the store. Never the reason a screen fails to render."""

    def __init__(self, database_service: DatabaseService):
        self.database_service = database_service

    def _load_mods_or_empty(self) -> list:
        try:
            return self.database_service.load_mods()
        except AetherError as e:
            logger.warning(f"Stats: treating mods as empty ({e})")
            return []

    def _count_presets(self) -> int:
        try:
            return len(self.database_service.load_presets())
        except AetherError as e:
            logger.warning(f"Stats: treating presets as empty ({e})")
            return 0

    @service_operation("get stats")
    def get_stats(self) -> ModStats:
        mods = self._load_mods_or_empty()
        installed = len(mods)
        active = sum(1 for m in mods if m.is_active)
        return ModStats(
            installed=installed,
            active=active,
            inactive=installed - active,
            presets=self._count_presets(),
        )

    @service_operation("list character summaries")
    def list_character_summaries(self) -> list[CharacterSummary]:
        """Known roster first (zero counts included), then any other tags found."""
        mods = self._load_mods_or_empty()
        installed: dict[str, int] = {}
        active: dict[str, int] = {}
        for mod in mods:
            if not mod.character:
                continue
            installed[mod.character] = installed.get(mod.character, 0) + 1
            if mod.is_active:
                active[mod.character] = active.get(mod.character, 0) + 1

        roster = list(KNOWN_CHARACTERS)
        known_ids = {char_id for char_id, _ in roster}
        roster.extend((tag, tag) for tag in sorted(installed) if tag not in known_ids)

        return [
            CharacterSummary(
                id=char_id,
                name=name,
                installed_mods=installed.get(char_id, 0),
                active_mods=active.get(char_id, 0),
            )
            for char_id, name in roster
        ]
