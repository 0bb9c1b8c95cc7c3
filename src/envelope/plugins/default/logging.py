"""
Logging plugin reporting every envelope build.

Example::

    import logging
    from envelope.plugins import LoggingPlugin, register_hooks

    register_hooks(LoggingPlugin(level=logging.INFO))
"""

import logging
from typing import Any

from envelope.options import SerializationOptions
from envelope.plugins.hooks.markers import hook_impl

DEFAULT_LOGGER_NAME = "envelope.serialize"


class LoggingPlugin:
    """
    Plugin that logs serialization start and completion.

    Args:
        level: Log level used for both events.
        logger_name: Name of the logger to write to.
    """

    def __init__(self, level: int = logging.DEBUG, logger_name: str = DEFAULT_LOGGER_NAME):
        self.level = level
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @hook_impl
    def before_serialize(self, serializer: Any, options: SerializationOptions) -> None:
        self._logger.log(self.level, f"Serializing {_describe(serializer)}")

    @hook_impl
    def after_serialize(
        self,
        serializer: Any,
        options: SerializationOptions,
        result: Any,
        duration: float,
    ) -> None:
        self._logger.log(
            self.level,
            f"Serialized {_describe(serializer)} into {type(result).__name__} "
            f"in {duration * 1000:.3f}ms",
        )


def _describe(serializer: Any) -> str:
    wrapped = getattr(serializer, "object", None)
    if wrapped is not None:
        return f"{type(serializer).__name__}[{type(wrapped).__name__}]"
    return type(serializer).__name__
