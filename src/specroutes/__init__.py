"""specroutes -- Flatten OpenAPI 3.x / Swagger 2.0 documents into route descriptors.

This package reads the ``paths`` section of an API description and turns it
into an ordered list of :class:`~specroutes.models.RouteDescriptor` records,
one per path + HTTP method pair, ready to be wired into a web framework's
router.

Typical usage::

    from specroutes import extract_paths

    routes = extract_paths(document, {"apiSeparator": "/"})
    for r in routes:
        print(r.method.value, r.route, r.operation_id)

Modules:
    app: Typer application and CLI entry point.
    models: Pydantic models shared across the entire package.
    config: Option resolution from CLI flags, environment and project config.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
    extract: Route enumeration for Swagger 2.0 and OpenAPI 3.x documents.
    normalise: Pure normalisers for routes, operation ids, security, middleware.
"""

__version__ = "0.1.0"

from specroutes.extract import extract_paths, summarise_api  # noqa: E402

__all__ = ["__version__", "extract_paths", "summarise_api"]
