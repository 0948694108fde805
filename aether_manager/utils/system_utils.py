# aether_manager/utils/system_utils.py
from pathlib import Path
from send2trash import send2trash
from aether_manager.utils.logger_utils import logger


class SystemUtils:
    """A collection of static utility functions for OS-level interactions."""

    @staticmethod
    def move_to_recycle_bin(path: Path) -> bool:
        """
        Moves a file or folder to the system's recycle bin.
        Returns True on success, False on failure or if nothing is there.
        """
        if not path.exists():
            return False
        try:
            send2trash(str(path))
            logger.info(f"Moved '{path}' to the recycle bin.")
            return True
        except Exception as e:
            # The caller decides how to report this.
            logger.error(f"Error moving '{path}' to recycle bin: {e}")
            return False
