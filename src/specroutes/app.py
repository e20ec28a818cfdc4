"""Typer application and CLI entry point for specroutes.

This module wires together the top-level Typer application and its two
commands:

* ``routes`` -- print the route descriptors extracted from a document.
* ``summary`` -- print the API info block and routes grouped by method.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. Unhandled exceptions are written to a crash log under the
system temp directory.

See Also:
    :mod:`specroutes.config`: Option resolution for the ``routes`` command.
    :mod:`specroutes.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import sys
import tempfile
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import typer
from rich.logging import RichHandler

from specroutes import __version__
from specroutes.exit_codes import EXIT_GENERIC_FAILURE


app = typer.Typer(
    name="specroutes",
    help="Flatten Swagger 2.0 / OpenAPI 3.x paths into route descriptors.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"specroutes {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Route ``specroutes.*`` log records to stderr through Rich."""
    from specroutes.output import get_output

    logger = logging.getLogger("specroutes")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(
            console=get_output().stderr_console,
            show_time=False,
            show_path=False,
        )
    )
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~specroutes.output.OutputManager` built from
    the CLI flags and configures logging for the ``specroutes`` package.
    """
    from specroutes.output import OutputFormat, OutputManager, set_output

    fmt = OutputFormat.AUTO
    if json_output:
        fmt = OutputFormat.JSON
    elif plain_output:
        fmt = OutputFormat.PLAIN

    set_output(
        OutputManager(
            format=fmt,
            no_color=no_color,
            quiet=quiet,
            verbose=verbose,
        )
    )
    _configure_logging(verbose)


def _load_document(source: str) -> dict[str, Any]:
    """Load *source* and check it is a Swagger 2.0 or OpenAPI 3.x document."""
    from specroutes.output import debug
    from specroutes.parser import detect_spec_version, load_spec

    raw = load_spec(source)
    version = detect_spec_version(raw)
    debug(f"Loaded {source} (version {version})")
    return raw


@app.command("routes")
def routes_command(
    source: str = typer.Argument(
        ..., help="Path, http(s) URL, or '-' for stdin."
    ),
    separator: Optional[str] = typer.Option(
        None, "--separator", "-s", help="Operation id separator to replace with '_'."
    ),
    root_tag: Optional[str] = typer.Option(
        None, "--root-tag", "-r", help="Tag that exempts a route from the base path."
    ),
) -> None:
    """List the routes declared by an API document.

    Options not given on the command line fall back to
    ``SPECROUTES_API_SEPARATOR`` / ``SPECROUTES_ROOT_TAG`` and then to
    ``./specroutes.json``.

    Example::

        specroutes routes swagger.yaml --separator /
        specroutes --json routes https://example.com/openapi.json
    """
    from specroutes.config import resolve_options
    from specroutes.exceptions import SpecroutesError
    from specroutes.extract import extract_paths
    from specroutes.output import OutputFormat, error, get_output, info

    try:
        options = resolve_options(cli_separator=separator, cli_root_tag=root_tag)
        routes = extract_paths(_load_document(source), options)
    except SpecroutesError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    output = get_output()
    if not routes:
        info("No routes found.")
        if output.format == OutputFormat.JSON:
            output.format_response([])
        return

    if output.format == OutputFormat.JSON:
        output.format_response([r.model_dump(mode="json") for r in routes])
        return

    headers = ["Method", "Route", "Operation ID", "Security", "Middleware"]
    rows = [
        [
            r.method.value.upper(),
            r.route,
            r.operation_id or "-",
            r.security or "-",
            ", ".join(str(m) for m in r.middleware) or "-",
        ]
        for r in routes
    ]
    output.print_table(headers, rows, title=f"Routes ({len(rows)})")


@app.command("summary")
def summary_command(
    source: str = typer.Argument(
        ..., help="Path, http(s) URL, or '-' for stdin."
    ),
) -> None:
    """Show API info and routes grouped by HTTP method."""
    from specroutes.config import resolve_options
    from specroutes.exceptions import SpecroutesError
    from specroutes.extract import summarise_api
    from specroutes.output import error, format_response

    try:
        summary = summarise_api(_load_document(source), resolve_options())
    except SpecroutesError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    format_response(summary.model_dump(mode="json"))


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path."""
    logs_dir = Path(tempfile.gettempdir()) / "specroutes"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``specroutes`` console script.

    :class:`~specroutes.exceptions.SpecroutesError` instances that escape a
    command cause a clean exit with the error's ``exit_code``. All other
    exceptions produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from specroutes.exceptions import SpecroutesError
        from specroutes.output import error

        if isinstance(exc, SpecroutesError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
