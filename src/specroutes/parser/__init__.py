"""Document loading -- fetch an API description and recognise its version.

Typical usage::

    from specroutes.parser import load_spec, detect_spec_version

    raw = load_spec("https://petstore.swagger.io/v2/swagger.json")
    version = detect_spec_version(raw)

The extractors in :mod:`specroutes.extract` never perform I/O; this
sub-package is the only place a document is read from disk, the network or
stdin.
"""

from specroutes.parser.loader import detect_spec_version, load_spec

__all__ = ["load_spec", "detect_spec_version"]
