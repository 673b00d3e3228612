from __future__ import annotations

import pytest
from pydantic import ValidationError

from safe_crystals.config import Settings
from safe_crystals.models import Location, World


def test_defaults_have_no_guarded_zone(monkeypatch) -> None:
    monkeypatch.delenv("SAFE_CRYSTALS_END_PORTAL_WORLD", raising=False)

    settings = Settings(_env_file=None)

    assert settings.app_name == "safe-crystals"
    assert settings.permission_backend is None
    assert settings.guarded_zone() is None


def test_guarded_zone_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("SAFE_CRYSTALS_END_PORTAL_WORLD", "world_the_end")
    monkeypatch.setenv("SAFE_CRYSTALS_END_PORTAL_X", "0.5")
    monkeypatch.setenv("SAFE_CRYSTALS_END_PORTAL_Y", "64")
    monkeypatch.setenv("SAFE_CRYSTALS_END_PORTAL_Z", "0.5")
    monkeypatch.setenv("SAFE_CRYSTALS_END_PORTAL_RADIUS", "12")
    monkeypatch.setenv("SAFE_CRYSTALS_PERMISSION_BACKEND", "regions")

    settings = Settings(_env_file=None)
    zone = settings.guarded_zone()

    assert settings.permission_backend == "regions"
    assert zone is not None
    assert zone.radius == 12
    assert zone.contains(Location(World("world_the_end"), 3, 66, 3)) is True
    assert zone.contains(Location(World("world_the_end"), 30, 66, 3)) is False


def test_env_file_is_read(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("SAFE_CRYSTALS_END_PORTAL_WORLD", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("SAFE_CRYSTALS_END_PORTAL_WORLD=the_end\nSAFE_CRYSTALS_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    settings = Settings(_env_file=env_file)

    assert settings.log_level == "DEBUG"
    assert settings.guarded_zone().center.world.name == "the_end"


def test_negative_radius_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, end_portal_radius=-1)
