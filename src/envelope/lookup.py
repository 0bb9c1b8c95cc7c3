"""Locate the serializer class for a resource."""

from __future__ import annotations

import logging
from inspect import isclass
from typing import Any

from envelope.default_serializer import DefaultSerializer
from envelope.namespaces import NamespaceCache
from envelope.namespaces import namespace_for_type

logger = logging.getLogger(__name__)

SERIALIZER_SUFFIX = "Serializer"


def serializer_for(
    resource: Any,
    namespace: Any = None,
    cache: NamespaceCache | None = None,
) -> type:
    """
    Find the serializer class for ``resource``.

    Looks up ``<TypeName>Serializer`` first in ``namespace`` (a module or
    class) and then in the namespace enclosing the resource's type. Falls
    back to DefaultSerializer; ``None``, lists and tuples always get it.

    Args:
        resource: Object to be serialized.
        namespace: Optional module or class searched first.
        cache: Namespace cache; the process-wide cache when omitted.

    Returns:
        A serializer class accepting the resource as its first argument.
    """
    if resource is None or isinstance(resource, (list, tuple)):
        return DefaultSerializer

    resource_type = type(resource)
    name = f"{resource_type.__name__}{SERIALIZER_SUFFIX}"

    for scope in (namespace, namespace_for_type(resource_type, cache)):
        if scope is None:
            continue
        candidate = getattr(scope, name, None)
        if isclass(candidate):
            logger.debug(f"Using {candidate.__qualname__} for {resource_type.__qualname__}")
            return candidate

    logger.debug(f"No {name} found, falling back to DefaultSerializer")
    return DefaultSerializer
