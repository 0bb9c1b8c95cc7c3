"""Hook specifications for serialization lifecycle events."""

from typing import Any

from envelope.options import SerializationOptions
from envelope.plugins.hooks.markers import hook_spec


class SerializeSpec:
    """Hook specifications fired around every ``as_json`` call."""

    @hook_spec
    def before_serialize(self, serializer: Any, options: SerializationOptions) -> None:
        """
        Called before a serializer builds its envelope.

        Args:
            serializer: The Serializable or DefaultSerializer being invoked.
            options: Normalized options of the call.
        """

    @hook_spec
    def after_serialize(
        self,
        serializer: Any,
        options: SerializationOptions,
        result: Any,
        duration: float,
    ) -> None:
        """
        Called after a serializer returned its envelope.

        Args:
            serializer: The Serializable or DefaultSerializer that was invoked.
            options: Normalized options of the call.
            result: The envelope returned to the caller.
            duration: Time taken to build the envelope in seconds.
        """
