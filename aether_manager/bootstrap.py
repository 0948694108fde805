# aether_manager/bootstrap.py
from pathlib import Path

from aether_manager.core.constants import APP_DISPLAY_NAME, APP_VERSION
from aether_manager.core.exceptions import ConfigRootError
from aether_manager.services import (
    CommandService,
    ConfigService,
    DatabaseService,
    ModService,
    PresetService,
    StatsService,
)
from aether_manager.utils import ImageUtils, SystemUtils
from aether_manager.utils.logger_utils import logger, reconfigure_logger


def build_services(config_root: Path | None = None) -> CommandService:
    """
    Composition root: creates and wires all services.
    Failing to resolve the config root is fatal and propagates.
    """
    try:
        config_service = ConfigService(config_root)
        reconfigure_logger(config_service.log_dir)
    except ConfigRootError as e:
        logger.critical(f"Cannot start {APP_DISPLAY_NAME}: {e}")
        raise

    logger.info(f"{APP_DISPLAY_NAME} {APP_VERSION} using config root '{config_service.config_root}'")

    # Services with no or minimal dependencies first.
    database_service = DatabaseService(config_service)
    system_utils = SystemUtils()
    image_utils = ImageUtils()

    # Services that depend on other services.
    mod_service = ModService(
        database_service=database_service,
        config_service=config_service,
        system_utils=system_utils,
        image_utils=image_utils,
    )
    preset_service = PresetService(
        database_service=database_service,
        config_service=config_service,
        mod_service=mod_service,
    )
    stats_service = StatsService(database_service)

    logger.info("Core services and utilities initialized.")
    return CommandService(
        config_service=config_service,
        database_service=database_service,
        mod_service=mod_service,
        preset_service=preset_service,
        stats_service=stats_service,
    )
