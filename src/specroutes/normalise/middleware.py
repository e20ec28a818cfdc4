"""Resolve per-operation ``x-middleware`` selectors against a registry."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

logger = logging.getLogger(__name__)

MiddlewareSelector = Union[str, list[str]]


def normalise_middleware(
    registry: Mapping[str, Any],
    selector: Optional[MiddlewareSelector],
) -> list[Any]:
    """Return the middleware values named by *selector*, in selector order.

    The selector is the operation's ``x-middleware`` value: absent, a single
    name, or a list of names. Names missing from *registry* are dropped
    rather than passed through, so the result only ever contains values the
    caller registered. A miss is logged as a warning, or at debug level when
    the registry is empty (no middleware configured at all).

    Args:
        registry: Global middleware registry for this extraction call.
        selector: Name or names to resolve. ``None`` gives an empty list.

    Returns:
        A new list of resolved middleware values.
    """
    if selector is None:
        return []

    names = [selector] if isinstance(selector, str) else selector
    resolved: list[Any] = []
    for name in names:
        if name not in registry:
            level = logging.WARNING if registry else logging.DEBUG
            logger.log(level, "Unknown middleware '%s', skipping", name)
            continue
        resolved.append(registry[name])
    return resolved
