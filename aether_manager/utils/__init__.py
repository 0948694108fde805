from .file_utils import FileUtils
from .system_utils import SystemUtils
from .image_utils import ImageUtils

__all__ = ["FileUtils", "SystemUtils", "ImageUtils"]
