"""Envelope: root-wrapped, metadata-merged serialization of domain objects."""

__version__ = "0.1.0"

from . import settings
from .default_serializer import DefaultSerializer
from .exceptions import EnvelopeError
from .exceptions import NamespaceError
from .exceptions import UnserializableObjectError
from .lookup import serializer_for
from .namespaces import NamespaceCache
from .namespaces import get_namespace_cache
from .namespaces import resolve_namespace
from .options import UNSET
from .options import SerializationOptions
from .plugins.manager import _initialize_plugin_system
from .primitives import object_as_json
from .serializable import Serializable

# Initialize hooks system on module import
_initialize_plugin_system()

__all__ = [
    "DefaultSerializer",
    "EnvelopeError",
    "NamespaceCache",
    "NamespaceError",
    "Serializable",
    "SerializationOptions",
    "UNSET",
    "UnserializableObjectError",
    "get_namespace_cache",
    "object_as_json",
    "resolve_namespace",
    "serializer_for",
    "settings",
]
