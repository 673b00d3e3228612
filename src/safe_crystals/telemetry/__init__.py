"""Logging setup for SafeCrystals."""

from .logging import configure_logging

__all__ = ["configure_logging"]
