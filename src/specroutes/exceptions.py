"""Exception hierarchy for specroutes.

All exceptions inherit from :class:`SpecroutesError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`specroutes.exit_codes`.
The top-level error handler in :func:`specroutes.app.main` catches
``SpecroutesError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

Subclass hierarchy::

    SpecroutesError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- SpecParseError      (exit 7)
    +-- InvalidInputError   (exit 8)
    +-- ConfigError         (exit 1)
"""

from specroutes.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_INPUT,
    EXIT_INVALID_USAGE,
    EXIT_SPEC_PARSE_ERROR,
)


class SpecroutesError(Exception):
    """Base exception for all specroutes errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`specroutes.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(SpecroutesError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class SpecParseError(SpecroutesError):
    """Raised when an API document cannot be loaded, parsed, or versioned."""

    exit_code = EXIT_SPEC_PARSE_ERROR


class InvalidInputError(SpecroutesError):
    """Raised when a parsed document has no usable ``paths`` mapping, or an
    operation field has the wrong type (e.g. ``tags`` that is not a list)."""

    exit_code = EXIT_INVALID_INPUT


class ConfigError(SpecroutesError):
    """Raised for configuration problems (invalid project config JSON or values)."""

    exit_code = EXIT_GENERIC_FAILURE
