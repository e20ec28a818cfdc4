"""Extract routes from OpenAPI 3.x documents.

OpenAPI 3.x has no ``basePath``; the prefix comes from the path component of
a ``servers`` entry instead. The most specific declaration wins:

1. ``servers`` on the operation,
2. ``servers`` on the path item,
3. ``servers`` on the document.

Only the first server of the winning list is used, and server variables are
replaced by their ``default`` values before the URL is split. As with
Swagger 2.0, operations whose first tag is the root tag get no prefix.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import urlsplit

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
        document: A parsed OpenAPI 3.x document. Only ``servers`` and
            ``paths`` are read. The document is not modified.
        options: Same as :func:`specroutes.extract.v2.extract_paths`.

    Returns:
        Descriptors ordered by ``paths`` key order, then HTTP method order.

    Raises:
        InvalidInputError: If ``paths`` is absent or not a mapping, or an
            operation field has the wrong type.
    """
    opts = coerce_options(options)
    paths = get_paths(document)
    document_base = server_base_path(document.get("servers"))

    routes: list[RouteDescriptor] = []
    for path, path_item, method, operation in iter_operations(paths):
        if is_root_operation(operation, opts.root_tag):
            prefix = ""
        elif operation.servers:
            prefix = server_base_path(operation.servers)
        elif path_item.get("servers"):
            prefix = server_base_path(path_item["servers"])
        else:
            prefix = document_base
        routes.append(build_descriptor(method, f"{prefix}{path}", operation, opts))
    return routes


def server_base_path(servers: Optional[Any]) -> str:
    """Return the path component of the first server's URL.

    ``https://api.example.com/api/v1`` and ``/api/v1`` both give
    ``/api/v1``; a URL without a path gives ``""``.
    """
    if not servers or not isinstance(servers, list):
        return ""
    server = servers[0]
    if not isinstance(server, Mapping):
        return ""

    url = str(server.get("url") or "")
    variables = server.get("variables") or {}
    if isinstance(variables, Mapping):
        for name, variable in variables.items():
            default = variable.get("default", "") if isinstance(variable, Mapping) else ""
            url = url.replace(f"{{{name}}}", str(default))
    return urlsplit(url).path
