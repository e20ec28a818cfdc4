"""Load API descriptions from a URL, local file, or stdin.

This module handles all I/O for fetching raw Swagger / OpenAPI documents and
converting them into Python dictionaries.  It supports both JSON and YAML
formats with automatic format detection, and recognises the two document
families the extractors understand (Swagger 2.0 and OpenAPI 3.x).

The two public functions are:

* :func:`load_spec` -- Load and parse a document from any supported source.
* :func:`detect_spec_version` -- Return the declared ``swagger`` / ``openapi``
  version string, rejecting anything else.

After loading, the raw dict should be passed to
:func:`~specroutes.extract.extract_paths`.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

import httpx
import yaml

from specroutes.exceptions import SpecParseError

logger = logging.getLogger(__name__)


def load_spec(source: str) -> dict[str, Any]:
    """Load an API document from URL, file path, or stdin ('-').

    Supports JSON and YAML formats.
    Auto-detects format from content/extension.

    Args:
        source: A URL (http/https), file path, or '-' for stdin.

    Returns:
        The parsed document as a dictionary.

    Raises:
        SpecParseError: If the source cannot be loaded or parsed.
    """
    if source == "-":
        return _load_from_stdin()
    elif source.startswith(("http://", "https://")):
        return _load_from_url(source)
    else:
        return _load_from_file(source)


def _load_from_stdin() -> dict[str, Any]:
    """Read a document from stdin and parse it as JSON, then YAML."""
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise SpecParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise SpecParseError("No input received from stdin")

    return _parse_content(content, hint="stdin")


def _load_from_url(url: str) -> dict[str, Any]:
    """Fetch a document over HTTP(S). Supports JSON and YAML responses.

    Raises:
        SpecParseError: If the URL cannot be fetched or content cannot be parsed.
    """
    logger.debug("Fetching API document from %s", url)
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecParseError(
            f"HTTP {exc.response.status_code} fetching document from {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecParseError(f"Failed to fetch document from {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"

    return _parse_content(response.text, hint=hint)


def _load_from_file(path: str) -> dict[str, Any]:
    """Load a document from a local file.

    Supports .json, .yaml, and .yml extensions. Falls back to content-based
    detection if the extension is not recognized.

    Raises:
        SpecParseError: If the file cannot be read or content cannot be parsed.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise SpecParseError(f"API document not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecParseError(f"Failed to read API document {path}: {exc}") from exc

    if not content.strip():
        raise SpecParseError(f"API document is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    logger.debug("Loaded %d bytes from %s", len(content), file_path)
    return _parse_content(content, hint=hint)


def _parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse content as JSON or YAML.

    Tries JSON first (unless hint is 'yaml'), then falls back to YAML.
    Valid JSON is also valid YAML, but JSON parsing is stricter and faster.

    Args:
        content: The raw string content.
        hint: Optional format hint ('json' or 'yaml').

    Returns:
        The parsed dictionary.

    Raises:
        SpecParseError: If the content cannot be parsed as either format, or
            does not hold an object at the top level.
    """
    json_error: Exception | None = None
    yaml_error: Exception | None = None

    if hint != "yaml":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            json_error = exc
            if hint == "json":
                raise SpecParseError(f"Invalid JSON: {exc}") from exc
        else:
            return _require_object(result)

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        yaml_error = exc
    else:
        return _require_object(result)

    msg = "Failed to parse document as JSON or YAML"
    if json_error:
        msg += f"\n  JSON error: {json_error}"
    if yaml_error:
        msg += f"\n  YAML error: {yaml_error}"
    raise SpecParseError(msg)


def _require_object(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        kind = type(result).__name__ if result is not None else "empty document"
        raise SpecParseError(f"API document must be a JSON/YAML object (got {kind})")
    return result


def detect_spec_version(spec: dict[str, Any]) -> str:
    """Return the document's declared version string.

    Accepts Swagger ``2.x`` (``swagger`` field) and OpenAPI ``3.x``
    (``openapi`` field).

    Args:
        spec: The parsed document dictionary.

    Returns:
        The version string, e.g. ``'2.0'`` or ``'3.0.3'``.

    Raises:
        SpecParseError: If neither field is present or the version is not
            one of the supported families.
    """
    if "openapi" in spec:
        version_str = str(spec["openapi"])
        if version_str.startswith("3."):
            return version_str
        raise SpecParseError(
            f"Unsupported OpenAPI version: {version_str}. "
            "Only Swagger 2.0 and OpenAPI 3.x are supported."
        )

    if "swagger" in spec:
        version_str = str(spec["swagger"])
        if version_str.startswith("2."):
            return version_str
        raise SpecParseError(
            f"Unsupported Swagger version: {version_str}. "
            "Only Swagger 2.0 and OpenAPI 3.x are supported."
        )

    raise SpecParseError(
        "Missing 'swagger' or 'openapi' field. Is this an API description?"
    )
