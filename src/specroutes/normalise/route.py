"""Canonicalise route strings built from a base path and a path template."""

from __future__ import annotations

import re

_REPEATED_SLASHES = re.compile(r"/{2,}")


def normalise_route(raw: str) -> str:
    """Return *raw* as a canonical absolute route.

    Runs of ``/`` collapse to one, a single leading ``/`` is ensured, and a
    trailing ``/`` is removed unless the route is the root itself. Path
    template segments such as ``{petId}`` are left alone.

    The function is idempotent, so already-normalised routes pass through
    unchanged.

    Args:
        raw: Concatenation of a base path and a path template, e.g.
            ``"/api/v1/" + "/pets/"``.

    Returns:
        The canonical route, e.g. ``"/api/v1/pets"``. Empty input gives ``"/"``.
    """
    route = _REPEATED_SLASHES.sub("/", f"/{raw}")
    if len(route) > 1:
        route = route.rstrip("/")
    return route
