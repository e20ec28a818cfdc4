"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~specroutes.exceptions.SpecroutesError` subclass.
Shell wrappers and CI jobs can inspect the exit code to tell a broken
document apart from a bad invocation without parsing stderr.

Example::

    $ specroutes routes broken.yaml
    $ echo $?
    7   # EXIT_SPEC_PARSE_ERROR -- the document could not be parsed
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments or missing required parameters."""

EXIT_SPEC_PARSE_ERROR = 7
"""The API document could not be loaded, parsed, or its version recognised."""

EXIT_INVALID_INPUT = 8
"""The API document was parsed but its ``paths`` section has the wrong shape."""
