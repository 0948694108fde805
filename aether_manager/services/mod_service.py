# aether_manager/services/mod_service.py
import dataclasses
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path

from aether_manager.core.constants import (
    CHARACTERS_DIR_NAME,
    OTHER_MODS_DIR_NAME,
    THUMBNAIL_EXTENSION,
    UNKNOWN_ORIGINAL_NAME,
)
from aether_manager.core.exceptions import (
    AetherError,
    ConfigurationError,
    FilesystemError,
    NotFoundError,
    ValidationError,
)
from aether_manager.core.results import service_operation
from aether_manager.core.signals import global_signals
from aether_manager.models.config_model import AppSettings
from aether_manager.models.mod_model import DriftEntry, DriftReport, Mod
from aether_manager.services.config_service import ConfigService
from aether_manager.services.database_service import DatabaseService
from aether_manager.utils.file_utils import FileUtils
from aether_manager.utils.image_utils import ImageUtils
from aether_manager.utils.logger_utils import logger
from aether_manager.utils.system_utils import SystemUtils


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _normalize_character(character: str | None) -> str | None:
    if character is None or not character.strip():
        return None
    character = character.strip()
    if "/" in character or "\\" in character or character in (".", ".."):
        raise ValidationError(f"Invalid character name: '{character}'")
    return character


def _find_index(mods: list[Mod], mod_id: str) -> int:
    for index, mod in enumerate(mods):
        if mod.id == mod_id:
            return index
    raise NotFoundError("Mod not found")


class ModService:
    """
    Install, update, toggle and delete single mods.

    Every public operation is one read-modify-write of mods.json under the
    database lock. Activation state changes are two-phase: the file system is
    changed first, the metadata is committed second. A crash in between leaves
    is_active out of sync with the active folder; check_active_drift reports it.
    """

    def __init__(
        self,
        database_service: DatabaseService,
        config_service: ConfigService,
        system_utils: SystemUtils,
        image_utils: ImageUtils,
    ):
        # --- Injected Services & Utilities ---
        self.database_service = database_service
        self.config_service = config_service
        self.system_utils = system_utils
        self.image_utils = image_utils

    # --- Active folder primitives (raise, shared with PresetService) ---
    def place_in_active_dir(self, mod: Mod, active_dir: Path):
        """Copies the canonical tree to <active_dir>/<original_name>."""
        target = active_dir / mod.original_name
        logger.debug(f"Activating '{mod.title}': copying {mod.file_path} -> {target}")
        FileUtils.copy_tree(Path(mod.file_path), target)

    def remove_from_active_dir(self, mod: Mod, active_dir: Path) -> bool:
        """Deletes <active_dir>/<original_name>. An already-absent entry is fine."""
        target = active_dir / mod.original_name
        logger.debug(f"Deactivating '{mod.title}': removing {target}")
        removed = FileUtils.remove_tree(target)
        if not removed:
            logger.warning(
                f"'{target}' was already absent while deactivating '{mod.title}'."
            )
        return removed

    def _storage_destination(self, character: str | None, original_name: str) -> Path:
        if character:
            parent = self.config_service.storage_root / CHARACTERS_DIR_NAME / character
        else:
            parent = self.config_service.storage_root / OTHER_MODS_DIR_NAME
        return parent / original_name

    # --- Queries ---
    @service_operation("list mods")
    def list_mods(self) -> list[Mod]:
        return self.database_service.load_mods()

    @service_operation("get mod")
    def get_mod(self, mod_id: str) -> Mod:
        mod = self.database_service.get_mod(mod_id)
        if mod is None:
            raise NotFoundError("Mod not found")
        return mod

    @service_operation("list character mods")
    def list_mods_by_character(self, character: str) -> list[Mod]:
        return [m for m in self.database_service.load_mods() if m.character == character]

    @service_operation("list other mods")
    def list_other_mods(self) -> list[Mod]:
        return [m for m in self.database_service.load_mods() if not m.character]

    # --- Lifecycle ---
    @service_operation("install mod")
    def install_mod(
        self,
        source_path: str | Path,
        title: str,
        character: str | None = None,
        description: str | None = None,
        thumbnail: str | None = None,
    ) -> Mod:
        """
        Copies a mod folder into the private storage root and records it as
        inactive. The source folder is never referenced again afterwards.
        """
        source = Path(source_path)
        logger.info(f"Installing mod: title={title}, source={source}, character={character}")

        if not source.exists():
            raise ValidationError(f"Folder does not exist: {source}")
        if not source.is_dir():
            raise ValidationError(f"Path must be a folder, not a file: {source}")

        character = _normalize_character(character)
        original_name = Path(os.path.abspath(source)).name or UNKNOWN_ORIGINAL_NAME
        destination = self._storage_destination(character, original_name)

        with self.database_service.lock:
            # A corrupt store fails here, before anything is copied
            self.database_service.load_mods()
            FileUtils.ensure_dir(destination.parent)
            if destination.exists():
                logger.warning(
                    f"Storage folder '{destination}' already exists. Copying over it."
                )
            FileUtils.copy_tree(source, destination)

            new_mod = Mod(
                id=str(uuid.uuid4()),
                title=title,
                description=description,
                thumbnail=thumbnail,
                is_active=False,
                date_added=_now_iso(),
                character=character,
                file_path=str(destination),
                original_name=original_name,
            )
            self.database_service.upsert_mod(new_mod)

        logger.info(f"Installed '{title}' as {new_mod.id} at {destination}")
        global_signals.mods_changed.emit()
        return new_mod

    @service_operation("update mod")
    def update_mod(
        self,
        mod_id: str,
        title: str | None = None,
        thumbnail: str | None = None,
        description: str | None = None,
    ) -> Mod:
        """Applies only the fields that were supplied."""
        changes = {
            key: value
            for key, value in (("title", title), ("thumbnail", thumbnail), ("description", description))
            if value is not None
        }
        with self.database_service.lock:
            mods = self.database_service.load_mods()
            index = _find_index(mods, mod_id)
            mods[index] = dataclasses.replace(mods[index], **changes)
            self.database_service.save_mods(mods)

        logger.info(f"Updated mod {mod_id}: {sorted(changes)}")
        global_signals.mods_changed.emit()
        return mods[index]

    @service_operation("toggle mod")
    def toggle_mod(self, mod_id: str) -> bool:
        """Activates an inactive mod or deactivates an active one. Returns the new state."""
        logger.info(f"Toggling mod active: {mod_id}")
        with self.database_service.lock:
            mods = self.database_service.load_mods()
            index = _find_index(mods, mod_id)
            mod = mods[index]

            settings = self.config_service.load_settings()
            active_dir = self.config_service.require_active_dir(settings)

            if mod.is_active:
                self.remove_from_active_dir(mod, active_dir)
            else:
                self.place_in_active_dir(mod, active_dir)

            mods[index] = dataclasses.replace(mod, is_active=not mod.is_active)
            self.database_service.save_mods(mods)

        new_state = mods[index].is_active
        logger.info(f"Mod '{mod.title}' is now {'active' if new_state else 'inactive'}")
        global_signals.mods_changed.emit()
        return new_state

    @service_operation("delete mod")
    def delete_mod(self, mod_id: str) -> dict:
        """
        Removes the active copy (best-effort), the canonical copy and the record.
        Returns {"id": ..., "warnings": [...]} listing anything that was tolerated.
        """
        warnings: list[str] = []
        with self.database_service.lock:
            mods = self.database_service.load_mods()
            index = _find_index(mods, mod_id)
            mod = mods[index]
            logger.info(f"Deleting mod '{mod.title}' ({mod_id})")

            settings = AppSettings()
            try:
                settings = self.config_service.load_settings()
            except AetherError as e:
                warnings.append(f"Could not read settings: {e}")

            if mod.is_active:
                try:
                    active_dir = self.config_service.require_active_dir(settings)
                    self.remove_from_active_dir(mod, active_dir)
                    mod = dataclasses.replace(mod, is_active=False)
                    mods[index] = mod
                except AetherError as e:
                    warnings.append(f"Could not remove active copy: {e}")

            try:
                self._remove_canonical_copy(mod, settings, warnings)
            except FilesystemError:
                # Keep the record so the user can retry; persist the deactivation.
                self.database_service.save_mods(mods)
                raise

            self._remove_thumbnail(mod)
            del mods[index]
            self.database_service.save_mods(mods)

        for warning in warnings:
            logger.warning(warning)
        global_signals.mods_changed.emit()
        return {"id": mod_id, "warnings": warnings}

    def _remove_canonical_copy(self, mod: Mod, settings: AppSettings, warnings: list[str]):
        canonical = Path(mod.file_path)
        if not canonical.exists() and not canonical.is_symlink():
            warnings.append(f"Canonical copy '{canonical}' was already missing.")
            return
        if settings.delete_to_recycle_bin:
            if not self.system_utils.move_to_recycle_bin(canonical):
                raise FilesystemError(f"Failed to move '{canonical}' to the recycle bin.")
        else:
            FileUtils.remove_tree(canonical)

    def _remove_thumbnail(self, mod: Mod):
        if not mod.thumbnail:
            return
        thumb = Path(mod.thumbnail)
        if thumb.parent == self.config_service.thumbnails_dir:
            try:
                FileUtils.remove_tree(thumb)
            except FilesystemError as e:
                logger.warning(f"Could not remove thumbnail for {mod.id}: {e}")

    # --- Thumbnails ---
    @service_operation("set mod thumbnail")
    def set_mod_thumbnail_from_file(self, mod_id: str, image_path: str | Path) -> Mod:
        """Stores a compressed WebP copy of the image and points Mod.thumbnail at it."""
        image_path = Path(image_path)
        if not image_path.is_file() or not self.image_utils.is_valid_image(image_path):
            raise ValidationError(f"Not a readable image: {image_path}")

        with self.database_service.lock:
            mods = self.database_service.load_mods()
            index = _find_index(mods, mod_id)

            target = self.config_service.thumbnails_dir / f"{mod_id}.{THUMBNAIL_EXTENSION}"
            try:
                self.image_utils.compress_and_save_image(image_path, target)
            except ValueError as e:
                raise FilesystemError(str(e)) from e

            mods[index] = dataclasses.replace(mods[index], thumbnail=str(target))
            self.database_service.save_mods(mods)

        global_signals.mods_changed.emit()
        return mods[index]

    # --- Diagnostics ---
    @service_operation("check active drift")
    def check_active_drift(self) -> DriftReport:
        """
        Compares is_active with what actually sits in the active folder.
        Read-only: nothing is repaired.
        """
        settings = self.config_service.load_settings()
        active_dir = settings.active_dir
        if active_dir is None:
            raise ConfigurationError(
                "ZZMI mods path not configured. Please set it in settings."
            )

        mismatched = []
        missing_canonical = []
        for mod in self.database_service.load_mods():
            present = (active_dir / mod.original_name).exists()
            if present != mod.is_active:
                mismatched.append(
                    DriftEntry(
                        mod_id=mod.id,
                        title=mod.title,
                        recorded_active=mod.is_active,
                        present_on_disk=present,
                    )
                )
            if not Path(mod.file_path).exists():
                missing_canonical.append(mod.id)

        if mismatched or missing_canonical:
            logger.warning(
                f"Drift detected: {len(mismatched)} mismatched, {len(missing_canonical)} missing canonical copies."
            )
        return DriftReport(
            active_dir=str(active_dir),
            mismatched=mismatched,
            missing_canonical=missing_canonical,
        )
