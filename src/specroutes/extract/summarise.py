"""Summarise an API document: info block plus routes grouped by method."""

from __future__ import annotations

from typing import Any, Mapping

from specroutes.extract.common import OptionsLike
from specroutes.extract.dispatch import extract_paths
from specroutes.models import ApiInfo, ApiSummary, HTTPMethod


def summarise_api(document: Mapping[str, Any], options: OptionsLike = None) -> ApiSummary:
    """Build an :class:`~specroutes.models.ApiSummary` for *document*.

    ``info.title``, ``info.description`` and ``info.version`` fill the info
    block, stringified when the document holds other scalars. Routes are
    grouped under their method in HTTP method order; methods with no routes
    are left out.

    Raises:
        InvalidInputError: Propagated from :func:`extract_paths`.
    """
    routes = extract_paths(document, options)

    info = document.get("info")
    if not isinstance(info, Mapping):
        info = {}
    title = info.get("title")
    description = info.get("description")
    version = info.get("version")

    paths: dict[str, list[str]] = {}
    for method in HTTPMethod:
        matching = [r.route for r in routes if r.method is method]
        if matching:
            paths[method.value] = matching

    return ApiSummary(
        info=ApiInfo(
            name=str(title) if title not in (None, "") else "Untitled API",
            description=str(description) if description is not None else None,
            version=str(version) if version is not None else "0.0.0",
        ),
        paths=paths,
    )
