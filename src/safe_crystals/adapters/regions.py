"""In-process region build-permission oracle.

Mirrors the rules of a WorldGuard-style region plugin closely enough for local
simulation and tests: building is governed by the highest-priority regions that
cover a location, and owners or members of any of those regions may build.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from safe_crystals.errors import RegionFileError
from safe_crystals.models import Location, Player


@dataclass(frozen=True, slots=True)
class Region:
    name: str
    world: str
    min: tuple[int, int, int]
    max: tuple[int, int, int]
    owners: frozenset[str] = field(default_factory=frozenset)
    members: frozenset[str] = field(default_factory=frozenset)
    priority: int = 0

    def contains(self, location: Location) -> bool:
        if location.world is None or location.world.name != self.world:
            return False
        coords = location.block_coords()
        return all(lo <= value <= hi for lo, value, hi in zip(self.min, coords, self.max))

    def __post_init__(self) -> None:
        object.__setattr__(self, "owners", frozenset(_member_key(v) for v in self.owners))
        object.__setattr__(self, "members", frozenset(_member_key(v) for v in self.members))

    def is_member(self, player: Player) -> bool:
        keys = {_member_key(player.name), _member_key(player.uuid)}
        return any(key in self.owners or key in self.members for key in keys)


class RegionPermissionOracle:
    """Build-permission oracle over a fixed set of cuboid regions."""

    def __init__(self, regions: list[Region] | None = None, *, default_allow: bool = True) -> None:
        self._regions = list(regions or [])
        self._default_allow = default_allow

    @property
    def regions(self) -> list[Region]:
        return list(self._regions)

    def can_build(self, player: Player, location: Location) -> bool:
        if location is None or location.world is None:
            return False

        covering = [region for region in self._regions if region.contains(location)]
        if not covering:
            return self._default_allow

        top = max(region.priority for region in covering)
        return any(region.is_member(player) for region in covering if region.priority == top)

    @classmethod
    def from_file(cls, file_path: str | Path, *, default_allow: bool = True) -> RegionPermissionOracle:
        path = Path(file_path)
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise RegionFileError(f"Unable to read region file {path}: {exc}") from exc

        if not isinstance(payload, list):
            raise RegionFileError(f"Region file {path} must contain a JSON list of regions")

        return cls([_parse_region(item, path) for item in payload], default_allow=default_allow)


def _parse_region(item: object, path: Path) -> Region:
    if not isinstance(item, dict):
        raise RegionFileError(f"Region entries in {path} must be objects")
    try:
        low = tuple(int(v) for v in item["min"])
        high = tuple(int(v) for v in item["max"])
        if len(low) != 3 or len(high) != 3:
            raise ValueError("min and max need exactly three coordinates")
        return Region(
            name=str(item["name"]),
            world=str(item["world"]),
            min=tuple(map(min, low, high)),
            max=tuple(map(max, low, high)),
            owners=frozenset(str(v) for v in item.get("owners", [])),
            members=frozenset(str(v) for v in item.get("members", [])),
            priority=int(item.get("priority", 0)),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise RegionFileError(f"Invalid region entry in {path}: {item!r} ({exc})") from exc


def _member_key(value: str) -> str:
    # Player names never contain dashes, so UUIDs match in dashed or compact form.
    return str(value).lower().replace("-", "")
