"""Event bus and plugin lifecycle wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, TypeVar

from safe_crystals.adapters.host import BuildPermissionOracle, WorldAccess
from safe_crystals.adapters.permissions import resolve_permission_backend
from safe_crystals.adapters.regions import RegionPermissionOracle
from safe_crystals.config import Settings
from safe_crystals.errors import PermissionBackendUnavailableError, SafeCrystalsError
from safe_crystals.guard import CrystalGuard
from safe_crystals.models import EntityDamageByEntityEvent, EntityExplodeEvent, Event, PlayerInteractEvent

E = TypeVar("E", bound=Event)

REGIONS_BACKEND = "regions"


@dataclass(slots=True)
class Subscription:
    event_type: type[Event]
    handler: Callable[[Event], None]
    ignore_cancelled: bool = True


class EventBus:
    """Synchronous event dispatcher; handlers run in subscription order."""

    def __init__(self) -> None:
        self._subscriptions: list[Subscription] = []

    def subscribe(
        self,
        event_type: type[E],
        handler: Callable[[E], None],
        *,
        ignore_cancelled: bool = True,
    ) -> Subscription:
        subscription = Subscription(event_type, handler, ignore_cancelled)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    def dispatch(self, event: E) -> E:
        for subscription in list(self._subscriptions):
            if not isinstance(event, subscription.event_type):
                continue
            if subscription.ignore_cancelled and event.cancelled:
                continue
            subscription.handler(event)
        return event


def build_permission_oracle(settings: Settings) -> BuildPermissionOracle:
    """Resolve the configured oracle, failing loudly if none is usable."""
    if settings.permission_backend == REGIONS_BACKEND:
        if not settings.regions_file:
            return RegionPermissionOracle(default_allow=settings.regions_default_allow)
        return RegionPermissionOracle.from_file(settings.regions_file, default_allow=settings.regions_default_allow)
    return resolve_permission_backend(settings.permission_backend)


class SafeCrystalsPlugin:
    """Registers the crystal guard with a host event bus."""

    def __init__(
        self,
        settings: Settings,
        world: WorldAccess,
        *,
        oracle: BuildPermissionOracle | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._world = world
        self._oracle = oracle
        self._logger = logger or logging.getLogger("safe_crystals.plugin")
        self._guard: CrystalGuard | None = None
        self._subscriptions: list[Subscription] = []
        self._bus: EventBus | None = None

    @property
    def guard(self) -> CrystalGuard | None:
        return self._guard

    @property
    def enabled(self) -> bool:
        return self._bus is not None

    def enable(self, bus: EventBus) -> CrystalGuard:
        if self._bus is not None and self._guard is not None:
            if bus is not self._bus:
                raise SafeCrystalsError("SafeCrystals is already enabled on another event bus; disable it first")
            return self._guard

        try:
            oracle = self._oracle if self._oracle is not None else build_permission_oracle(self._settings)
        except PermissionBackendUnavailableError:
            self._logger.error(
                "permission_backend_unavailable",
                extra={"permission_backend": self._settings.permission_backend},
            )
            raise

        zone = self._settings.guarded_zone()
        self._guard = CrystalGuard(
            oracle,
            self._world,
            guarded_zone=zone,
            logger=logging.getLogger("safe_crystals.guard"),
        )
        self._subscriptions = [
            bus.subscribe(EntityExplodeEvent, self._guard.on_entity_explode),
            bus.subscribe(EntityDamageByEntityEvent, self._guard.on_entity_damage_by_entity),
            bus.subscribe(PlayerInteractEvent, self._guard.on_player_interact),
        ]
        self._bus = bus
        self._logger.info(
            "plugin_enabled",
            extra={
                "permission_backend": self._settings.permission_backend,
                "guarded_zone": None if zone is None else zone.center.world.name,
            },
        )
        return self._guard

    def disable(self) -> None:
        if self._bus is None:
            return
        for subscription in self._subscriptions:
            self._bus.unsubscribe(subscription)
        self._subscriptions = []
        self._bus = None
        self._logger.info("plugin_disabled")
