"""Host boundaries: permission oracle, world access, and bundled implementations."""

from .host import BuildPermissionOracle, WorldAccess
from .memory_world import DroppedItem, InMemoryWorld
from .permissions import resolve_permission_backend
from .regions import Region, RegionPermissionOracle

__all__ = [
    "BuildPermissionOracle",
    "DroppedItem",
    "InMemoryWorld",
    "Region",
    "RegionPermissionOracle",
    "WorldAccess",
    "resolve_permission_backend",
]
