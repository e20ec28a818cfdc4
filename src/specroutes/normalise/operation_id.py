"""Canonicalise operation ids into handler-friendly tokens."""

from __future__ import annotations

from typing import Optional

JOINER = "_"


def normalise_operation_id(operation_id: str, separator: Optional[str] = None) -> str:
    """Replace every occurrence of *separator* in *operation_id* with ``_``.

    ``"v1/test"`` with separator ``"/"`` becomes ``"v1_test"``. Without a
    separator, or when the separator does not occur, the id is returned as
    is. Applying the function twice gives the same result as applying it
    once, provided *separator* does not contain ``_``. With ``"_a"``,
    ``"x_aa"`` becomes ``"x_a"`` and then ``"x_"``.

    Args:
        operation_id: The ``operationId`` from the document. Must be a string.
        separator: The character(s) to replace. ``None`` or ``""`` disables
            replacement.

    Returns:
        The canonical operation id.
    """
    if not separator:
        return operation_id
    return operation_id.replace(separator, JOINER)
