"""Flatten OpenAPI security requirements into a single comparable token.

A document expresses security as a list of *requirement* objects, OR'd
together, where each requirement maps scheme names to scope lists that are
AND'd. Route handlers in the target frameworks only need to know which
permissions are involved, so this module collapses the whole structure into
one sorted, comma separated string.

The OR/AND structure is discarded on purpose: the token only says which
scopes (or scope-less schemes) are mentioned anywhere in the list.
"""

from __future__ import annotations

from typing import Optional

SecurityRequirement = dict[str, list[str]]


def normalise_security(security: Optional[list[SecurityRequirement]]) -> Optional[str]:
    """Collapse a list of security requirements into one deterministic string.

    Each scheme contributes its scopes. A scheme listed without scopes, such
    as ``{"bearerAuth": []}``, contributes its own name instead. Tokens are
    de-duplicated (case-sensitive), sorted lexicographically and joined with
    ``,``.

    Both an absent ``security`` field and the explicit opt-out ``[]`` yield
    ``None``, so callers cannot tell "not specified" from "disabled". That
    matches the behaviour route consumers already depend on.

    Args:
        security: The operation's ``security`` list, or ``None``.

    Returns:
        For example ``"admin,identity.basic,identity.email"``, or ``None``
        when there is nothing to report.

    Example::

        >>> normalise_security([{"example": ["identity.email", "admin"]}])
        'admin,identity.email'
        >>> normalise_security([]) is None
        True
    """
    if not security:
        return None

    tokens: set[str] = set()
    for requirement in security:
        for scheme, scopes in requirement.items():
            if scopes:
                tokens.update(scopes)
            else:
                tokens.add(scheme)

    if not tokens:
        return None
    return ",".join(sorted(tokens))
