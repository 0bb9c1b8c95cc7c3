"""
Namespace resolution with a process-wide memoizing cache.

A namespace is the module (or enclosing class) that holds a serializable type.
Resolving it means importing a dotted path, which is comparatively expensive,
so results are kept in a NamespaceCache shared by every entity of the process
unless a different cache is injected.
"""

from __future__ import annotations

import importlib
import logging
import threading
from typing import Any, Callable, Hashable, TypeVar

from envelope.exceptions import NamespaceError
from envelope.utils import enclosing_path
from envelope.utils import qualified_name

logger = logging.getLogger(__name__)

T = TypeVar("T")

_GLOBAL_NAMESPACE_CACHE: NamespaceCache | None = None
_CACHE_LOCK = threading.RLock()


class NamespaceCache:
    """
    Lock-guarded fetch-or-store map.

    ``compute`` runs outside the lock, so two threads may both compute a value
    for the same key; the first one stored wins and every caller receives it.

    Examples:
        >>> cache = NamespaceCache()
        >>> cache.fetch_or_store("shop", lambda: "first")
        'first'
        >>> cache.fetch_or_store("shop", lambda: "second")
        'first'
        >>> "shop" in cache, len(cache)
        (True, 1)
    """

    def __init__(self) -> None:
        self._entries: dict[Hashable, Any] = {}
        self._lock = threading.RLock()

    def fetch_or_store(self, key: Hashable, compute: Callable[[], T]) -> T:
        """
        Return the value cached under ``key``, computing and storing it on a miss.

        Args:
            key: Cache key, usually a dotted module name.
            compute: Zero-argument callable producing the value on a miss.

        Returns:
            The cached value; identical for every caller once stored.
        """
        with self._lock:
            if key in self._entries:
                return self._entries[key]

        value = compute()

        with self._lock:
            if key in self._entries:
                # Another caller stored first
                return self._entries[key]
            self._entries[key] = value
            logger.debug(f"Cached namespace entry for '{key}'")
            return value

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the cached value for ``key`` without computing it."""
        with self._lock:
            return self._entries.get(key, default)

    def clear(self) -> None:
        """Drop every cached entry."""
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"NamespaceCache(entries={len(self)})"


def resolve_namespace(path: str) -> Any:
    """
    Resolve a dotted path to a module or a class nested inside one.

    The longest importable module prefix is imported and the remaining
    segments are walked as attributes.

    Args:
        path: Dotted path, e.g. ``"shop"`` or ``"shop.Catalog"``.

    Returns:
        The module or object found at ``path``.

    Raises:
        NamespaceError: If no prefix imports or an attribute is missing.

    Examples:
        >>> resolve_namespace("collections.abc").__name__
        'collections.abc'
        >>> resolve_namespace("collections.OrderedDict").__name__
        'OrderedDict'
    """
    parts = path.split(".")

    for i in range(len(parts), 0, -1):
        module_name = ".".join(parts[:i])
        try:
            module = importlib.import_module(module_name)
        except ImportError:
            continue

        obj: Any = module
        try:
            for attr in parts[i:]:
                obj = getattr(obj, attr)
        except AttributeError:
            break
        return obj

    raise NamespaceError(f"Could not resolve namespace '{path}'")


def get_namespace_cache() -> NamespaceCache:
    """
    Get the process-wide namespace cache (thread-safe).

    Created on first use.
    """
    with _CACHE_LOCK:
        global _GLOBAL_NAMESPACE_CACHE
        if _GLOBAL_NAMESPACE_CACHE is None:
            _GLOBAL_NAMESPACE_CACHE = NamespaceCache()
        return _GLOBAL_NAMESPACE_CACHE


def set_namespace_cache(cache: NamespaceCache | None) -> None:
    """
    Replace the process-wide namespace cache (thread-safe).

    Passing ``None`` resets it so the next ``get_namespace_cache()`` call
    creates a fresh one.
    """
    with _CACHE_LOCK:
        global _GLOBAL_NAMESPACE_CACHE
        _GLOBAL_NAMESPACE_CACHE = cache


def namespace_for_type(cls: type, cache: NamespaceCache | None = None) -> Any:
    """
    Resolve the namespace enclosing ``cls`` through the namespace cache.

    Args:
        cls: Type whose enclosing module or class is wanted.
        cache: Cache to use; the process-wide cache when omitted.

    Returns:
        The enclosing module or class, or ``None`` if ``cls`` has no
        enclosing namespace or it cannot be imported.
    """
    path = enclosing_path(qualified_name(cls))
    if path is None:
        return None

    cache = get_namespace_cache() if cache is None else cache
    return cache.fetch_or_store(path, lambda: _resolve_or_none(path))


def _resolve_or_none(path: str) -> Any:
    try:
        return resolve_namespace(path)
    except NamespaceError:
        logger.debug(f"Namespace '{path}' is not importable; caching None")
        return None
