"""Choose the extractor that matches a document's format."""

from __future__ import annotations

import logging
from typing import Any, Mapping

from specroutes.extract import v2, v3
from specroutes.extract.common import OptionsLike
from specroutes.models import RouteDescriptor

logger = logging.getLogger(__name__)


def is_openapi3(document: Mapping[str, Any]) -> bool:
    """True when *document* declares an ``openapi`` version field."""
    return isinstance(document, Mapping) and "openapi" in document


def extract_paths(
    document: Mapping[str, Any], options: OptionsLike = None
) -> list[RouteDescriptor]:
    """Extract route descriptors from a Swagger 2.0 or OpenAPI 3.x document.

    Documents with an ``openapi`` key go through
    :func:`specroutes.extract.v3.extract_paths`; everything else, including
    bare ``{"basePath": ..., "paths": ...}`` mappings, is treated as
    Swagger 2.0.
    """
    if is_openapi3(document):
        logger.debug("Extracting routes as OpenAPI %s", document.get("openapi"))
        return v3.extract_paths(document, options)
    logger.debug("Extracting routes as Swagger 2.0")
    return v2.extract_paths(document, options)
