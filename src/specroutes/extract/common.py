"""Helpers shared by the Swagger 2.0 and OpenAPI 3.x extractors.

Both extractors walk ``paths`` in the same order and build descriptors the
same way; they only differ in how the base path of a route is chosen.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional, Union

from pydantic import ValidationError

from specroutes.exceptions import InvalidInputError
from specroutes.models import ExtractOptions, HTTPMethod, Operation, RouteDescriptor
from specroutes.normalise import (
    normalise_middleware,
    normalise_operation_id,
    normalise_route,
    normalise_security,
)

logger = logging.getLogger(__name__)

OptionsLike = Union[ExtractOptions, Mapping[str, Any], None]


def coerce_options(options: OptionsLike) -> ExtractOptions:
    """Turn ``None``, a mapping, or an :class:`ExtractOptions` into the model.

    Raises:
        InvalidInputError: If a mapping holds values of the wrong type.
    """
    if options is None:
        return ExtractOptions()
    if isinstance(options, ExtractOptions):
        return options
    try:
        return ExtractOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid extract options: {exc}") from exc


def get_paths(document: Any) -> Mapping[str, Any]:
    """Return the document's ``paths`` mapping.

    Raises:
        InvalidInputError: If the document is not a mapping, or ``paths`` is
            missing or not a mapping. An empty mapping is fine.
    """
    if not isinstance(document, Mapping):
        raise InvalidInputError(
            f"API document must be a mapping (got {type(document).__name__})"
        )
    paths = document.get("paths")
    if paths is None:
        raise InvalidInputError("API document has no 'paths' section")
    if not isinstance(paths, Mapping):
        raise InvalidInputError(
            f"'paths' must be a mapping (got {type(paths).__name__})"
        )
    return paths


def iter_operations(
    paths: Mapping[str, Any],
) -> Iterator[tuple[str, Mapping[str, Any], HTTPMethod, Operation]]:
    """Yield ``(path, path_item, method, operation)`` in extraction order.

    Paths are visited in the mapping's own order; within a path, methods are
    visited in :class:`~specroutes.models.HTTPMethod` declaration order. Keys
    whose value is ``None`` are treated as absent. Path items that are not
    mappings are skipped with a warning. An operation that is present but
    not a mapping still counts as defined and is yielded as an empty
    :class:`~specroutes.models.Operation`.
    """
    for path, path_item in paths.items():
        if not isinstance(path_item, Mapping):
            logger.warning("Path item for '%s' is not a mapping, skipping", path)
            continue

        for method in HTTPMethod:
            raw_op = path_item.get(method.value)
            if raw_op is None:
                continue
            if not isinstance(raw_op, Mapping):
                logger.warning(
                    "Operation %s %s is not a mapping, treating its fields as absent",
                    method.value.upper(),
                    path,
                )
                yield path, path_item, method, Operation()
                continue
            yield path, path_item, method, Operation.model_validate(dict(raw_op))


def is_root_operation(operation: Operation, root_tag: str) -> bool:
    """True when the operation's first tag is *root_tag*."""
    tags = operation.tags
    return isinstance(tags, list) and bool(tags) and tags[0] == root_tag


def build_descriptor(
    method: HTTPMethod,
    raw_route: str,
    operation: Operation,
    options: ExtractOptions,
) -> RouteDescriptor:
    """Run the normalisers over one operation and assemble its descriptor."""
    operation_id: Optional[str] = None
    if operation.operation_id is not None:
        operation_id = normalise_operation_id(
            operation.operation_id, options.api_separator
        )

    descriptor = RouteDescriptor(
        method=method,
        route=normalise_route(raw_route),
        operation_id=operation_id,
        security=normalise_security(operation.security),
        middleware=normalise_middleware(options.middleware, operation.x_middleware),
    )
    logger.debug(
        "Extracted %s %s -> %s",
        method.value.upper(),
        descriptor.route,
        descriptor.operation_id,
    )
    return descriptor
