"""Pure normalisers applied to each operation during route extraction.

* :mod:`~specroutes.normalise.route` -- canonical absolute route strings.
* :mod:`~specroutes.normalise.operation_id` -- separator replacement in ids.
* :mod:`~specroutes.normalise.security` -- flattening of security requirements.
* :mod:`~specroutes.normalise.middleware` -- resolution of ``x-middleware``.

None of these functions perform I/O or keep state between calls.
"""

from specroutes.normalise.middleware import normalise_middleware
from specroutes.normalise.operation_id import normalise_operation_id
from specroutes.normalise.route import normalise_route
from specroutes.normalise.security import normalise_security

__all__ = [
    "normalise_middleware",
    "normalise_operation_id",
    "normalise_route",
    "normalise_security",
]
