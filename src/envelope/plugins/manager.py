"""Utility functions to manage the project-wide hook configuration."""

import logging
import time
from contextlib import contextmanager
from inspect import isclass
from typing import Any, Iterator

from pluggy import PluginManager

from envelope.options import SerializationOptions

from .hooks.markers import HOOK_NAMESPACE
from .hooks.specs import SerializeSpec

logger = logging.getLogger(__name__)

_PLUGIN_ENTRY_POINT = "envelope.hooks"  # entry-point to load hooks from for installed plugins
_PLUGIN_MANAGER: PluginManager | None = None


# region API


def register_hooks(*hooks: Any) -> None:
    """Register specified envelope pluggy hooks."""
    hook_manager = _get_global_plugin_manager()
    for hooks_collection in hooks:
        if not hook_manager.is_registered(hooks_collection):
            if isclass(hooks_collection):
                raise TypeError(
                    "envelope expects hooks to be registered as instances. "
                    "Have you forgotten the `()` when registering a hook class?"
                )
            hook_manager.register(hooks_collection)


def unregister_hooks(*hooks: Any) -> None:
    """Unregister previously registered envelope hooks; unknown hooks are ignored."""
    hook_manager = _get_global_plugin_manager()
    for hooks_collection in hooks:
        if hook_manager.is_registered(hooks_collection):
            hook_manager.unregister(hooks_collection)


def register_plugins_entry_points(_plugin_manager: PluginManager | None = None) -> None:
    """Register envelope plugins from Python package entrypoints."""
    _plugin_manager = _plugin_manager if _plugin_manager else _get_global_plugin_manager()
    _plugin_manager.load_setuptools_entrypoints(_PLUGIN_ENTRY_POINT)  # Doesn't use setuptools


@contextmanager
def instrument(serializer: Any, options: SerializationOptions) -> Iterator[dict[str, Any]]:
    """
    Fire ``before_serialize``/``after_serialize`` around an envelope build.

    The caller stores the envelope under ``"result"`` in the yielded dict.
    ``after_serialize`` is skipped when the build raises.
    """
    hook = _get_global_plugin_manager().hook
    hook.before_serialize(serializer=serializer, options=options)
    outcome: dict[str, Any] = {}
    start = time.perf_counter()
    yield outcome
    duration = time.perf_counter() - start
    hook.after_serialize(
        serializer=serializer,
        options=options,
        result=outcome.get("result"),
        duration=duration,
    )


# region Helpers


def _initialize_plugin_system() -> PluginManager:
    """Initializes hooks for the envelope library."""
    manager = _create_plugin_manager()
    global _PLUGIN_MANAGER
    _PLUGIN_MANAGER = manager
    return manager


def _get_global_plugin_manager() -> PluginManager:
    """Returns initialized global plugin manager, creating it on first use."""
    plugin_manager = _PLUGIN_MANAGER
    if plugin_manager is None:
        plugin_manager = _initialize_plugin_system()
    return plugin_manager


def _create_plugin_manager() -> PluginManager:
    """Create a new PluginManager instance and register envelope's hook specs."""
    manager = PluginManager(HOOK_NAMESPACE)
    manager.trace.root.setwriter(
        logger.debug if logger.getEffectiveLevel() == logging.DEBUG else None
    )
    manager.enable_tracing()
    manager.add_hookspecs(SerializeSpec)
    return manager
