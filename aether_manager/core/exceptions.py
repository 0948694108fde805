# aether_manager/core/exceptions.py


class AetherError(Exception):
    """Base class for every error the services report back to a caller."""

    kind = "error"


class ValidationError(AetherError):
    """Bad input from the caller: missing source path, not a folder, etc."""

    kind = "validation"


class NotFoundError(ValidationError):
    kind = "not_found"


class ConfigurationError(AetherError):
    """The external active-mods directory is not configured."""

    kind = "configuration"


class StorageCorruptionError(AetherError):
    """A metadata document exists but cannot be parsed. Never auto-repaired."""

    kind = "storage_corruption"


class FilesystemError(AetherError, OSError):
    """A copy/remove/write failed. The original OSError is kept as __cause__."""

    kind = "filesystem"


class ConfigRootError(RuntimeError):
    """The private config root could not be resolved. Fatal for the whole subsystem."""

    kind = "config_root"
