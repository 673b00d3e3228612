"""Error types raised by SafeCrystals."""


class SafeCrystalsError(Exception):
    """Base class for SafeCrystals failures."""


class PermissionBackendUnavailableError(SafeCrystalsError, RuntimeError):
    """Raised at startup when no build-permission backend can be resolved."""


class RegionFileError(SafeCrystalsError, ValueError):
    """Raised when a region definition file cannot be parsed."""
