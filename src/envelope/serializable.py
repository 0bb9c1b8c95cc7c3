"""
The Serializable capability: root wrapping and metadata merging.

Types compose ``Serializable`` and implement ``serializable_object`` to get
``as_json``, which nests the bare representation under a root key and merges
sibling metadata and associations next to it.

Example:
    >>> class ProductSerializer(Serializable):
    ...     json_key = "product"
    ...     meta = {"count": 5}
    ...
    ...     def __init__(self, product):
    ...         self.product = product
    ...
    ...     def serializable_object(self, options=None):
    ...         return {"name": self.product}
    >>>
    >>> ProductSerializer("Lamp").as_json()
    {'product': {'name': 'Lamp'}, 'meta': {'count': 5}}
    >>> ProductSerializer("Lamp").as_json({"root": None})
    {'name': 'Lamp'}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from envelope.namespaces import NamespaceCache
from envelope.namespaces import namespace_for_type
from envelope.options import SerializationOptions
from envelope.plugins.manager import instrument
from envelope.settings import get_global_settings

OptionsLike = SerializationOptions | Mapping[str, Any] | None


class Serializable:
    """
    Mixin turning an entity into a serialization envelope.

    Composing types provide ``serializable_object`` and may override
    ``json_key``, ``meta``, ``meta_key`` and ``embedded_in_root_associations``.
    """

    json_key: Any = None
    """Default root key; falsy means the envelope is not wrapped."""

    meta: Any = None
    """Metadata merged next to the root key when truthy."""

    meta_key: str | None = None
    """Key the metadata is merged under; the settings' ``default_meta_key`` when ``None``."""

    namespace_cache: NamespaceCache | None = None
    """Cache used by ``namespace()``; the process-wide cache when ``None``."""

    _namespace_loaded: bool = False
    _cached_namespace: Any = None

    def as_json(self, options: OptionsLike = None) -> Any:
        """
        Build the envelope.

        The root key is ``options["root"]`` when that key is present, even if
        its value is ``None`` or ``False``, and ``json_key`` otherwise. A truthy
        root nests the bare representation under it and merges
        ``serializable_data()``; a falsy root returns the bare representation.

        Args:
            options: Mapping or SerializationOptions; ``None`` means no options.

        Returns:
            The envelope.
        """
        opts = SerializationOptions.coerce(options)
        with instrument(self, opts) as outcome:
            root = opts.resolve_root(self.json_key)
            if root:
                envelope = {root: self.serializable_object(opts)}
                envelope.update(self.serializable_data())
            else:
                envelope = self.serializable_object(opts)
            outcome["result"] = envelope
        return envelope

    def serializable_object(self, options: OptionsLike = None) -> Any:
        """Return the bare representation of the entity."""
        raise NotImplementedError(
            f"{type(self).__name__} must implement serializable_object() to be serializable"
        )

    def serializable_data(self) -> dict[str, Any]:
        """Associations plus the metadata entry, as a new dict."""
        data = dict(self.embedded_in_root_associations())
        meta = self.meta
        if meta:
            data[self.meta_key or get_global_settings().default_meta_key] = meta
        return data

    def embedded_in_root_associations(self) -> Mapping[str, Any]:
        return {}

    def namespace(self) -> Any:
        """
        The module or class enclosing this entity's type, resolved once per instance.

        Returns ``None`` when the type has no enclosing namespace.
        """
        if self._namespace_loaded:
            return self._cached_namespace

        namespace = namespace_for_type(type(self), self.namespace_cache)
        # object.__setattr__ so frozen dataclasses can compose Serializable too
        object.__setattr__(self, "_cached_namespace", namespace)
        object.__setattr__(self, "_namespace_loaded", True)
        return namespace
