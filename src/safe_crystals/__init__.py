"""Ender Crystal protection for region-protected game servers."""

from .guard import CrystalGuard
from .plugin import EventBus, SafeCrystalsPlugin

__all__ = ["CrystalGuard", "EventBus", "SafeCrystalsPlugin"]

__version__ = "1.0.0"
