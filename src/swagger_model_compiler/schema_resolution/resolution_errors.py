"""Schema resolution failures."""

from __future__ import annotations


class SchemaResolutionError(Exception):
    """Raised when a resolution run cannot produce a complete schema set."""


class UnrecognizedSchemaTypeError(SchemaResolutionError):
    """Raised for a scalar kind outside the supported primitive set."""


class UnsupportedReferenceError(SchemaResolutionError):
    """Raised for a reference token that is not a local definitions reference."""


class MissingDefinitionError(SchemaResolutionError):
    """Raised when a reference names a definition absent from the document."""


class CyclicReferenceError(SchemaResolutionError):
    """Raised when definitions reference each other in a loop."""
