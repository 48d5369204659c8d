"""typemeta - OpenAPI schema classification over static type metadata."""

from typemeta.inspector import TypeInspector

__version__ = "0.1.0"

__all__ = ["TypeInspector", "__version__"]
