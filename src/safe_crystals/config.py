"""Runtime configuration for SafeCrystals."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from safe_crystals.models import Environment, GuardedZone, Location, World


class Settings(BaseSettings):
    """Environment-driven settings, loaded once when the plugin starts."""

    model_config = SettingsConfigDict(env_prefix="SAFE_CRYSTALS_", env_file=".env", extra="ignore")

    app_name: str = "safe-crystals"
    log_level: str = "INFO"
    permission_backend: str | None = Field(
        default=None,
        description="'module:attribute' of the build-permission oracle, or 'regions' for the bundled one.",
    )
    regions_file: str | None = Field(default=None, description="JSON region definitions for the 'regions' backend.")
    regions_default_allow: bool = True

    end_portal_world: str | None = Field(
        default=None,
        description="World holding the End exit portal. Leave unset to disable drop suppression.",
    )
    end_portal_x: float = 0.0
    end_portal_y: float = 0.0
    end_portal_z: float = 0.0
    end_portal_radius: float = Field(default=0.0, ge=0.0, description="Radius where broken crystals don't drop.")

    def guarded_zone(self) -> GuardedZone | None:
        if not self.end_portal_world:
            return None
        center = Location(
            World(self.end_portal_world, Environment.THE_END),
            self.end_portal_x,
            self.end_portal_y,
            self.end_portal_z,
        )
        return GuardedZone(center=center, radius=self.end_portal_radius)


settings = Settings()
