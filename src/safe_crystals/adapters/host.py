"""Boundary between the crystal guard and the game-server host."""

from __future__ import annotations

from typing import Protocol

from safe_crystals.models import Entity, Location, Material, Player


class BuildPermissionOracle(Protocol):
    """Region plugin capability that decides whether a player may build somewhere."""

    def can_build(self, player: Player, location: Location) -> bool:
        """Return True if ``player`` may build at ``location``."""


class WorldAccess(Protocol):
    """Read and mutate the host's world state."""

    def block_type(self, location: Location) -> str | None:
        """Return the material of the block containing ``location``, or None if unloaded."""

    def remove_entity(self, entity: Entity) -> None:
        """Remove ``entity`` from its world."""

    def drop_item(self, location: Location, material: Material) -> None:
        """Spawn one dropped item of ``material`` at ``location``."""
