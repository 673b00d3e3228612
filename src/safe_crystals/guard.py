"""Ender Crystal protection rules.

Crystals never explode or take damage from entities, except those sitting on
bedrock in the End, which belong to the dragon fight and keep vanilla behaviour.
Players who can build where a crystal stands break it into an item; projectiles
count as the player who shot them. Placing a crystal requires build permission
at the block above the clicked block, because the game puts the crystal there no
matter which face was clicked.
"""

from __future__ import annotations

import logging

from safe_crystals.adapters.host import BuildPermissionOracle, WorldAccess
from safe_crystals.models import (
    Action,
    Entity,
    EntityDamageByEntityEvent,
    EntityExplodeEvent,
    EntityType,
    Environment,
    GuardedZone,
    Location,
    Material,
    Player,
    PlayerInteractEvent,
    Projectile,
)

DROP_SUPPRESSED_SUFFIX = " - drop suppressed because dragon may spawn"


class CrystalGuard:
    """Event handlers that keep Ender Crystals from being destructive."""

    def __init__(
        self,
        oracle: BuildPermissionOracle,
        world: WorldAccess,
        *,
        guarded_zone: GuardedZone | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._oracle = oracle
        self._world = world
        self._guarded_zone = guarded_zone
        self._logger = logger or logging.getLogger("safe_crystals.guard")

    @property
    def guarded_zone(self) -> GuardedZone | None:
        return self._guarded_zone

    def on_entity_explode(self, event: EntityExplodeEvent) -> None:
        entity = event.entity
        if entity.type == EntityType.ENDER_CRYSTAL and not self.is_dragon_fight_crystal(entity.location):
            event.cancel()

    def on_entity_damage_by_entity(self, event: EntityDamageByEntityEvent) -> None:
        entity = event.entity
        if entity.type != EntityType.ENDER_CRYSTAL:
            return
        if self.is_dragon_fight_crystal(entity.location):
            return

        event.cancel()

        player = self._resolve_player(event.damager)
        if player is not None:
            self.try_break(entity, player)

    def on_player_interact(self, event: PlayerInteractEvent) -> None:
        if event.material != Material.END_CRYSTAL or event.action != Action.RIGHT_CLICK_BLOCK:
            return
        if event.clicked_block is None:
            return

        destination = event.clicked_block.relative(0, 1, 0).location
        if not self.can_build(event.player, destination):
            event.cancel()

    def try_break(self, crystal: Entity, player: Player) -> bool:
        """Break ``crystal`` on behalf of ``player`` if they can build there.

        Returns True when the crystal was removed.
        """
        loc = crystal.location
        if loc is None or loc.world is None:
            return False
        if not self.can_build(player, loc):
            return False

        self._world.remove_entity(crystal)
        suppressed = self.is_dragon_spawning_crystal(loc)
        if not suppressed:
            self._world.drop_item(loc, Material.END_CRYSTAL)

        self._logger.info(
            "%s broke an Ender Crystal at %s, %d, %d, %d%s",
            player.name,
            loc.world.name,
            loc.block_x,
            loc.block_y,
            loc.block_z,
            DROP_SUPPRESSED_SUFFIX if suppressed else "",
            extra={
                "player": player.name,
                "world": loc.world.name,
                "x": loc.block_x,
                "y": loc.block_y,
                "z": loc.block_z,
                "drop_suppressed": suppressed,
            },
        )
        return True

    def can_build(self, player: Player, location: Location | None) -> bool:
        if location is None or location.world is None:
            return False
        return bool(self._oracle.can_build(player, location))

    def is_dragon_fight_crystal(self, location: Location | None) -> bool:
        """Any crystal on bedrock in the End is treated as part of the dragon fight."""
        if location is None or location.world is None:
            return False
        if location.world.environment != Environment.THE_END:
            return False
        return self._world.block_type(location.relative(0, -1, 0)) == Material.BEDROCK

    def is_dragon_spawning_crystal(self, location: Location | None) -> bool:
        """Return True if the crystal is close enough to the exit portal to summon the dragon.

        Players can break the frame crystals between placing them and the dragon
        spawning. Exact positions are not checked because crystals can be pushed
        around with pistons.
        """
        return self._guarded_zone is not None and self._guarded_zone.contains(location)

    @staticmethod
    def _resolve_player(damager: Entity | None) -> Player | None:
        if isinstance(damager, Player):
            return damager
        if isinstance(damager, Projectile) and isinstance(damager.shooter, Player):
            return damager.shooter
        return None
