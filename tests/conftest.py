"""Shared test fixtures for specroutes.

Provides reusable fixtures for loading document fixtures, isolating the
environment and working directory, managing output state, and running CLI
commands. These fixtures are automatically discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import pytest
import yaml

from specroutes.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager and package logger after every test.

    Both cache references to sys.stderr at creation time. When Typer's
    CliRunner redirects those streams during a test and the test finishes,
    the cached references become stale ("I/O operation on closed file").
    """
    yield
    reset_output()
    logger = logging.getLogger("specroutes")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Raw document fixtures (plain dicts loaded from fixture files)
# ---------------------------------------------------------------------------


@pytest.fixture
def swagger_20_raw() -> dict[str, Any]:
    """Load the raw Swagger 2.0 example document."""
    with open(FIXTURES_DIR / "swagger_2.0.json") as f:
        return json.load(f)


@pytest.fixture
def openapi_30_raw() -> dict[str, Any]:
    """Load the raw OpenAPI 3.0 example document."""
    with open(FIXTURES_DIR / "openapi_3.0.yaml") as f:
        return yaml.safe_load(f)


@pytest.fixture
def middleware_registry() -> dict[str, Any]:
    """A small middleware registry keyed by the names used in the fixtures."""
    return {"authorise": "authorise-mw", "audit": "audit-mw"}


# ---------------------------------------------------------------------------
# Environment isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Clears all SPECROUTES_* environment variables and changes the working
    directory to tmp_path so that no ``specroutes.json`` from the repository
    leaks into a test.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    for var in ["SPECROUTES_API_SEPARATOR", "SPECROUTES_ROOT_TAG"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> OutputManager:
    """Install a PLAIN-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


@pytest.fixture
def json_output() -> OutputManager:
    """Install a JSON-format OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.JSON, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
