"""Dictionary-backed world used by the CLI simulator and tests."""

from __future__ import annotations

from dataclasses import dataclass

from safe_crystals.models import Entity, Location, Material


@dataclass(slots=True)
class DroppedItem:
    location: Location
    material: Material


class InMemoryWorld:
    """Records block materials, removed entities, and dropped items."""

    def __init__(self, blocks: dict[tuple[str, int, int, int], str] | None = None) -> None:
        self._blocks: dict[tuple[str, int, int, int], str] = dict(blocks or {})
        self.removed: list[Entity] = []
        self.drops: list[DroppedItem] = []

    def set_block(self, location: Location, material: str) -> None:
        if location.world is None:
            raise ValueError("Cannot place a block in an unknown world")
        self._blocks[(location.world.name, *location.block_coords())] = material

    def block_type(self, location: Location) -> str | None:
        if location is None or location.world is None:
            return None
        return self._blocks.get((location.world.name, *location.block_coords()))

    def remove_entity(self, entity: Entity) -> None:
        self.removed.append(entity)

    def drop_item(self, location: Location, material: Material) -> None:
        self.drops.append(DroppedItem(location=location, material=material))
