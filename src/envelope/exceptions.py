"""
Centralized exception classes for the envelope library.

All envelope-specific exceptions inherit from EnvelopeError for easy catching.
"""


class EnvelopeError(Exception):
    """Base exception for all envelope errors."""


class UnserializableObjectError(EnvelopeError, TypeError):
    """Raised when an object has no bare representation envelope knows how to build."""


class NamespaceError(EnvelopeError, LookupError):
    """Raised when a dotted namespace path cannot be resolved to a module or class."""
