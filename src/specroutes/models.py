"""Canonical Pydantic models shared across all specroutes modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into three groups:

**Options** -- supplied by the caller (or resolved by :mod:`specroutes.config`):
    :class:`ExtractOptions`.

**Input views** -- typed views over the caller's raw document, built on demand
by the extractors so that absent fields are explicit ``None`` values instead
of reflective lookups:
    :class:`HTTPMethod` and :class:`Operation`.

**Extractor output** -- produced fresh on every extraction call:
    :class:`RouteDescriptor`, :class:`ApiInfo`, and :class:`ApiSummary`.

All models use Pydantic v2. Models mirroring OpenAPI objects accept the
document's camelCase keys through aliases and ``populate_by_name``.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    field_validator,
)


# --- Options ---


class ExtractOptions(BaseModel):
    """Options controlling how routes are extracted from a document.

    Keys may be given in the camelCase form used by configuration files
    (``apiSeparator``, ``rootTag``) or by field name.

    The middleware registry is per call. Nothing in specroutes keeps a
    process-wide registry.

    Example::

        ExtractOptions(apiSeparator="/", middleware={"auth": check_token})
    """

    model_config = ConfigDict(populate_by_name=True)

    api_separator: Optional[str] = Field(
        default=None,
        alias="apiSeparator",
        description="Character(s) in operation ids to replace with '_'",
    )
    root_tag: str = Field(
        default="root",
        alias="rootTag",
        description="First tag that exempts an operation from base path prefixing",
    )
    middleware: dict[str, Any] = Field(
        default_factory=dict,
        description="Global registry mapping middleware name to value",
    )


# --- Input views ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods recognised on a path item.

    Declaration order is the enumeration order used by the extractors, so the
    output for a path is always get, post, put, delete, patch, head, options,
    trace regardless of key order in the document.
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"
    HEAD = "head"
    OPTIONS = "options"
    TRACE = "trace"


class Operation(BaseModel):
    """The fields of an OpenAPI *Operation Object* that route extraction reads.

    Every field is optional; ``None`` means the key was absent from the
    document. Numbers are accepted where strings are expected (YAML turns
    ``operationId: 2024`` into an int), and a value that still does not fit
    its field, such as ``tags: "root"``, is read as absent. Other keys
    (``parameters``, ``responses``, ...) are kept in ``model_extra`` untouched.
    """

    model_config = ConfigDict(
        extra="allow", populate_by_name=True, coerce_numbers_to_str=True
    )

    operation_id: Optional[str] = Field(default=None, alias="operationId")
    tags: Optional[list[str]] = None
    security: Optional[list[dict[str, list[str]]]] = None
    x_middleware: Optional[Union[str, list[str]]] = Field(
        default=None, alias="x-middleware"
    )
    servers: Optional[list[dict[str, Any]]] = None

    @field_validator(
        "operation_id", "tags", "security", "x_middleware", "servers", mode="wrap"
    )
    @classmethod
    def _absent_when_malformed(
        cls, value: Any, handler: ValidatorFunctionWrapHandler
    ) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


# --- Extractor output ---


class RouteDescriptor(BaseModel):
    """One routable operation: a single path + HTTP method pair.

    Instances are immutable and compare by value, which keeps test
    expectations simple.
    """

    model_config = ConfigDict(frozen=True)

    method: HTTPMethod
    route: str
    operation_id: Optional[str] = None
    security: Optional[str] = None
    middleware: list[Any] = Field(default_factory=list)


class ApiInfo(BaseModel):
    """API metadata from the document's ``info`` object."""

    name: str = "Untitled API"
    description: Optional[str] = None
    version: str = "0.0.0"


class ApiSummary(BaseModel):
    """Short overview of an API: its info block and routes grouped by method."""

    info: ApiInfo
    paths: dict[str, list[str]] = Field(default_factory=dict)
