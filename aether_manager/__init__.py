from aether_manager.core.constants import APP_VERSION as __version__

__all__ = ["__version__"]
