"""Exception hierarchy for forzatelem.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from ForzaTelemError for easy catching of any
forzatelem-specific error.

Decoding itself never raises: truncated datagrams and unknown type tags are
logged and skipped inside the decoder. The exceptions below cover the
operations that can legitimately fail for a caller.
"""

from __future__ import annotations


class ForzaTelemError(Exception):
    """Base exception for all forzatelem errors."""

    pass


class SchemaError(ForzaTelemError):
    """Raised when a schema lookup or definition is invalid.

    Examples:
        - Asking for the offset of a field the schema does not contain
        - Building a schema from malformed (name, tag) pairs
    """

    pass


class EncodeError(ForzaTelemError):
    """Raised when a value cannot be packed into its schema slot.

    Examples:
        - Integer out of range for its tag (e.g. 300 for a u8 field)
        - Float given for an integer tag
        - Reserved block that is not exactly 12 bytes
    """

    pass


class ConversionError(ForzaTelemError):
    """Raised when a decoded value is read as the wrong primitive type.

    Values are never coerced between types: asking an Int32 value for a
    Float32 fails instead of reinterpreting it.

    Attributes:
        requested: Name of the type the caller asked for
        actual: Name of the type the value actually holds
    """

    def __init__(self, requested: str, actual: str) -> None:
        self.requested = requested
        self.actual = actual
        super().__init__(f"Cannot convert {actual} value to {requested}")


class BindError(ForzaTelemError, OSError):
    """Raised when no candidate address could be bound for receiving."""

    pass
