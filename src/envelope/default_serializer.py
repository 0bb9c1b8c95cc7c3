"""A serializer usable for any object, including ``None``."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from envelope.exceptions import UnserializableObjectError
from envelope.namespaces import NamespaceCache
from envelope.options import SerializationOptions
from envelope.plugins.manager import instrument
from envelope.primitives import object_as_json
from envelope.serializable import OptionsLike
from envelope.serializable import Serializable
from envelope.settings import get_global_settings
from envelope.utils import build_repr


class DefaultSerializer(Serializable):
    """
    Provides a constant interface for all items.

    The wrapped object supplies its own bare representation through
    ``object_as_json``; no root key or metadata is ever added.

    Args:
        obj: Object to serialize; may be ``None``.
        options: Construction options. ``wrap_in_array`` (or ``_wrap_in_array``)
            wraps the result in a one-element list and turns ``None`` into ``[]``.
        namespace_cache: Cache used by ``namespace()``.

    Examples:
        >>> DefaultSerializer({"id": 1}).as_json()
        {'id': 1}
        >>> DefaultSerializer({"id": 1}, {"wrap_in_array": True}).as_json()
        [{'id': 1}]
        >>> DefaultSerializer(None, {"wrap_in_array": True}).serializable_hash()
        []
    """

    def __init__(
        self,
        obj: Any,
        options: Mapping[str, Any] | None = None,
        *,
        namespace_cache: NamespaceCache | None = None,
    ) -> None:
        options = options or {}
        self.object = obj
        self.wrap_in_array = bool(options.get("wrap_in_array", options.get("_wrap_in_array", False)))
        if namespace_cache is not None:
            self.namespace_cache = namespace_cache

    def as_json(self, options: OptionsLike = None) -> Any:
        opts = SerializationOptions.coerce(options)
        with instrument(self, opts) as outcome:
            outcome["result"] = self._build()
        return outcome["result"]

    serializable_hash = as_json
    serializable_object = as_json

    def _build(self) -> Any:
        if self.object is None:
            if self.wrap_in_array:
                return []
            if get_global_settings().nil_policy == "raise":
                raise UnserializableObjectError(
                    "DefaultSerializer received None without wrap_in_array"
                )

        envelope = object_as_json(self.object)
        return [envelope] if self.wrap_in_array else envelope

    def __repr__(self) -> str:
        return build_repr(
            "DefaultSerializer",
            kwargs={"object": self.object, "wrap_in_array": self.wrap_in_array},
        )
