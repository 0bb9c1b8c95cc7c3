"""Shared utility helpers for envelope."""

from __future__ import annotations

import reprlib
from collections.abc import Mapping
from typing import Any


def build_repr(class_name: str, *leading: str, kwargs: Mapping[str, Any] | None = None) -> str:
    """Build a concise repr string: ``ClassName(leading…, k=v, …)``."""
    parts = list(leading)
    if kwargs:
        parts.extend(f"{k}={reprlib.Repr().repr(v)}" for k, v in kwargs.items())
    return f"{class_name}({', '.join(parts)})"


def qualified_name(cls: type) -> str:
    """Return the fully qualified dotted name of a class, e.g. ``shop.Catalog.Product``."""
    module = cls.__module__
    if not module or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def enclosing_path(dotted: str) -> str | None:
    """
    Strip the last segment of a dotted path.

    Examples:
        >>> enclosing_path("shop.Catalog.Product")
        'shop.Catalog'
        >>> enclosing_path("Product") is None
        True
    """
    parts = dotted.split(".")
    if len(parts) < 2:
        return None
    return ".".join(parts[:-1])
