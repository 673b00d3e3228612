"""Resolution of the build-permission backend at plugin startup.

The backend is named by a ``"module:attribute"`` string so deployments can point
the guard at whatever region plugin bridge they run, while tests and the CLI use
the bundled region oracle.
"""

from __future__ import annotations

import importlib
from typing import Any

from safe_crystals.adapters.host import BuildPermissionOracle
from safe_crystals.errors import PermissionBackendUnavailableError


def resolve_permission_backend(target: str | None) -> BuildPermissionOracle:
    """Import and construct the oracle named by ``target``.

    A callable attribute is treated as a factory and called with no arguments.
    """
    if not target:
        raise PermissionBackendUnavailableError(
            "No permission backend configured. Set SAFE_CRYSTALS_PERMISSION_BACKEND to 'module:attribute'."
        )

    module_name, sep, attr = target.partition(":")
    if not sep or not module_name or not attr:
        raise PermissionBackendUnavailableError(
            f"Invalid permission backend {target!r}; expected 'module:attribute'."
        )

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:  # noqa: BLE001
        raise PermissionBackendUnavailableError(
            f"Unable to import permission backend module {module_name!r}. Is the region plugin installed?"
        ) from exc

    candidate: Any = module
    for part in attr.split("."):
        candidate = getattr(candidate, part, None)
        if candidate is None:
            raise PermissionBackendUnavailableError(
                f"Module {module_name!r} has no attribute {attr!r}."
            )

    oracle = candidate
    if isinstance(candidate, type) or (callable(candidate) and not hasattr(candidate, "can_build")):
        try:
            oracle = candidate()
        except Exception as exc:  # noqa: BLE001
            raise PermissionBackendUnavailableError(
                f"Permission backend factory {target!r} failed: {type(exc).__name__}: {exc}"
            ) from exc

    if not callable(getattr(oracle, "can_build", None)):
        raise PermissionBackendUnavailableError(
            f"Permission backend {target!r} does not provide can_build(player, location)."
        )
    return oracle
