# aether_manager/utils/image_utils.py
from pathlib import Path
from PIL import Image, UnidentifiedImageError

from aether_manager.core.constants import THUMBNAIL_MAX_SIZE, THUMBNAIL_QUALITY
from aether_manager.utils.logger_utils import logger


class ImageUtils:
    """A collection of static utility functions for image processing."""

    @staticmethod
    def is_valid_image(image_path: Path) -> bool:
        """Validates that a file can be opened as an image without decoding it fully."""
        try:
            with Image.open(image_path) as img:
                img.verify()
            return True
        except (UnidentifiedImageError, OSError, SyntaxError) as e:
            logger.warning(f"'{image_path}' is not a readable image: {e}")
            return False

    @staticmethod
    def compress_and_save_image(
        source_path: Path,
        target_path: Path,
        max_size: tuple[int, int] = THUMBNAIL_MAX_SIZE,
        quality: int = THUMBNAIL_QUALITY,
    ):
        """
        Resizes an image if it's too large, converts to RGB, and saves it
        as a compressed WebP file.
        """
        try:
            with Image.open(source_path) as src:
                img = src.copy()

            # Keeps aspect ratio
            img.thumbnail(max_size, Image.Resampling.LANCZOS)

            if img.mode != "RGB":
                img = img.convert("RGB")

            target_path.parent.mkdir(parents=True, exist_ok=True)
            img.save(target_path, "WEBP", quality=quality)

            logger.info(f"Successfully saved compressed image to '{target_path}'")

        except (UnidentifiedImageError, OSError) as e:
            logger.error(f"Could not save image to {target_path}: {e}")
            # Re-raise as a ValueError to be caught by the service layer
            raise ValueError(f"Failed to save image file: {e}") from e
