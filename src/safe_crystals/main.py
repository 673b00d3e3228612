"""CLI entrypoint for inspecting and simulating SafeCrystals."""

from __future__ import annotations

import typer
from rich import print

from safe_crystals.adapters import InMemoryWorld
from safe_crystals.config import settings
from safe_crystals.errors import SafeCrystalsError
from safe_crystals.models import Entity, EntityDamageByEntityEvent, EntityType, Environment, Location, Player, World
from safe_crystals.plugin import EventBus, SafeCrystalsPlugin
from safe_crystals.telemetry import configure_logging

app = typer.Typer(help="SafeCrystals Ender Crystal protection tools")


def _zone_summary() -> dict | None:
    zone = settings.guarded_zone()
    if zone is None:
        return None
    return {
        "world": zone.center.world.name,
        "x": zone.center.x,
        "y": zone.center.y,
        "z": zone.center.z,
        "radius": zone.radius,
    }


@app.command()
def start() -> None:
    """Show the effective configuration."""
    print(
        {
            "app_name": settings.app_name,
            "log_level": settings.log_level,
            "permission_backend": settings.permission_backend,
            "regions_file": settings.regions_file,
            "guarded_zone": _zone_summary(),
        }
    )


@app.command("zone-check")
def zone_check(
    world: str = typer.Option(..., help="World name"),
    x: float = typer.Option(..., help="X coordinate"),
    y: float = typer.Option(..., help="Y coordinate"),
    z: float = typer.Option(..., help="Z coordinate"),
) -> None:
    """Report whether a point lies inside the drop-suppression zone."""
    zone = settings.guarded_zone()
    location = Location(World(world), x, y, z)
    print(
        {
            "location": {"world": world, "x": x, "y": y, "z": z},
            "guarded_zone": _zone_summary(),
            "drop_suppressed": zone is not None and zone.contains(location),
        }
    )


@app.command("simulate-break")
def simulate_break(
    player: str = typer.Option(..., help="Name of the player hitting the crystal"),
    world: str = typer.Option(..., help="World name"),
    x: float = typer.Option(..., help="Crystal X"),
    y: float = typer.Option(..., help="Crystal Y"),
    z: float = typer.Option(..., help="Crystal Z"),
    environment: Environment = typer.Option(Environment.NORMAL, help="World environment"),
    under: str = typer.Option(None, help="Material of the block beneath the crystal, e.g. bedrock"),
) -> None:
    """Run one player-hits-crystal event through the configured plugin."""
    configure_logging(settings.log_level)
    crystal_world = World(world, environment)
    location = Location(crystal_world, x, y, z)

    host_world = InMemoryWorld()
    if under:
        host_world.set_block(location.relative(0, -1, 0), under.strip().lower())

    plugin = SafeCrystalsPlugin(settings, host_world)
    bus = EventBus()
    try:
        plugin.enable(bus)
    except SafeCrystalsError as exc:
        print({"error": str(exc)})
        raise typer.Exit(code=1)

    crystal = Entity(type=EntityType.ENDER_CRYSTAL, location=location)
    event = bus.dispatch(EntityDamageByEntityEvent(entity=crystal, damager=Player.named(player)))
    plugin.disable()

    print(
        {
            "cancelled": event.cancelled,
            "removed": crystal in host_world.removed,
            "drops": [
                {"material": drop.material.value, "x": drop.location.x, "y": drop.location.y, "z": drop.location.z}
                for drop in host_world.drops
            ],
        }
    )


if __name__ == "__main__":
    app()
