"""Route extraction -- walk a document's ``paths`` and emit route descriptors.

* :mod:`~specroutes.extract.v2` -- Swagger 2.0 documents, prefixed by
  ``basePath``.
* :mod:`~specroutes.extract.v3` -- OpenAPI 3.x documents, prefixed by the
  path of the applicable ``servers`` entry.
* :mod:`~specroutes.extract.dispatch` -- picks one of the above per document.
* :mod:`~specroutes.extract.summarise` -- API info plus routes by method.

Typical usage::

    from specroutes.extract import extract_paths

    routes = extract_paths(document, {"apiSeparator": "/"})
"""

from specroutes.extract.dispatch import extract_paths
from specroutes.extract.summarise import summarise_api

__all__ = ["extract_paths", "summarise_api"]
