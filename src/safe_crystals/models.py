from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from uuid import uuid4


class Environment(str, Enum):
    NORMAL = "normal"
    NETHER = "nether"
    THE_END = "the_end"


class Material(str, Enum):
    END_CRYSTAL = "end_crystal"
    BEDROCK = "bedrock"
    OBSIDIAN = "obsidian"
    AIR = "air"


class EntityType(str, Enum):
    ENDER_CRYSTAL = "ender_crystal"
    PLAYER = "player"
    ARROW = "arrow"
    CREEPER = "creeper"


class Action(str, Enum):
    """How a player interacted with a block or with the air."""

    LEFT_CLICK_BLOCK = "left_click_block"
    RIGHT_CLICK_BLOCK = "right_click_block"
    LEFT_CLICK_AIR = "left_click_air"
    RIGHT_CLICK_AIR = "right_click_air"
    PHYSICAL = "physical"


@dataclass(frozen=True, slots=True)
class World:
    name: str
    environment: Environment = Environment.NORMAL


@dataclass(frozen=True, slots=True)
class Location:
    """A point in a world. ``world`` is ``None`` when the host could not resolve it."""

    world: World | None
    x: float
    y: float
    z: float

    @property
    def block_x(self) -> int:
        return math.floor(self.x)

    @property
    def block_y(self) -> int:
        return math.floor(self.y)

    @property
    def block_z(self) -> int:
        return math.floor(self.z)

    def block_coords(self) -> tuple[int, int, int]:
        return self.block_x, self.block_y, self.block_z

    def relative(self, dx: float, dy: float, dz: float) -> Location:
        return Location(self.world, self.x + dx, self.y + dy, self.z + dz)

    def distance(self, other: Location) -> float:
        if self.world is None or other.world is None or self.world.name != other.world.name:
            raise ValueError("Cannot measure distance between locations in different worlds")
        return math.dist((self.x, self.y, self.z), (other.x, other.y, other.z))


@dataclass(frozen=True, slots=True)
class Block:
    """A block position snapped to integer coordinates."""

    world: World | None
    x: int
    y: int
    z: int
    material: str | None = None

    @classmethod
    def at(cls, location: Location, material: str | None = None) -> Block:
        return cls(location.world, location.block_x, location.block_y, location.block_z, material)

    @property
    def location(self) -> Location:
        return Location(self.world, float(self.x), float(self.y), float(self.z))

    def relative(self, dx: int, dy: int, dz: int) -> Block:
        return Block(self.world, self.x + dx, self.y + dy, self.z + dz)


@dataclass(slots=True)
class Entity:
    type: EntityType
    location: Location | None
    id: str = field(default_factory=lambda: uuid4().hex)


@dataclass(slots=True)
class Player(Entity):
    name: str = ""
    uuid: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def named(cls, name: str, location: Location | None = None) -> Player:
        return cls(type=EntityType.PLAYER, location=location, name=name)


@dataclass(slots=True)
class Projectile(Entity):
    shooter: Entity | None = None


@dataclass(frozen=True, slots=True)
class GuardedZone:
    """Sphere around the End exit portal where broken crystals never drop."""

    center: Location
    radius: float

    def contains(self, location: Location | None) -> bool:
        if location is None or location.world is None or self.center.world is None:
            return False
        if location.world.name != self.center.world.name:
            return False
        return location.distance(self.center) < self.radius


@dataclass(slots=True)
class Event:
    cancelled: bool = field(default=False, kw_only=True)

    def cancel(self) -> None:
        self.cancelled = True


@dataclass(slots=True)
class EntityExplodeEvent(Event):
    entity: Entity


@dataclass(slots=True)
class EntityDamageByEntityEvent(Event):
    entity: Entity
    damager: Entity | None


@dataclass(slots=True)
class PlayerInteractEvent(Event):
    player: Player
    action: Action
    material: Material | None
    clicked_block: Block | None = None
