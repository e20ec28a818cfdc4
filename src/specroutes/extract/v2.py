"""Extract routes from Swagger 2.0 documents.

Swagger 2.0 declares a single document-wide ``basePath``. Every route is
prefixed with it, except operations whose first tag is the configured root
tag (``"root"`` by default); those are served from the path template as is,
which is how version listings and health checks stay at ``/``.
"""

from __future__ import annotations

from typing import Any, Mapping

from specroutes.extract.common import (
    OptionsLike,
    build_descriptor,
    coerce_options,
    get_paths,
    is_root_operation,
    iter_operations,
)
from specroutes.models import RouteDescriptor


def extract_paths(
    document: Mapping[str, Any], options: OptionsLike = None
) -> list[RouteDescriptor]:
    """Extract one :class:`~specroutes.models.RouteDescriptor` per operation.

    Args:
        document: A parsed Swagger 2.0 document. Only ``basePath`` and
            ``paths`` are read. The document is not modified.
        options: An :class:`~specroutes.models.ExtractOptions`, a mapping
            with ``apiSeparator`` / ``rootTag`` / ``middleware`` keys, or
            ``None`` for defaults.

    Returns:
        Descriptors ordered by ``paths`` key order, then HTTP method order.

    Raises:
        InvalidInputError: If ``paths`` is absent or not a mapping, or an
            operation field has the wrong type.

    Example::

        doc = {
            "basePath": "/api/v1",
            "paths": {"/": {"get": {"tags": ["root"], "operationId": "versions"}}},
        }
        extract_paths(doc)[0].route  # "/"
    """
    opts = coerce_options(options)
    paths = get_paths(document)
    base_path = document.get("basePath") or ""

    routes: list[RouteDescriptor] = []
    for path, _, method, operation in iter_operations(paths):
        prefix = "" if is_root_operation(operation, opts.root_tag) else base_path
        routes.append(build_descriptor(method, f"{prefix}{path}", operation, opts))
    return routes
