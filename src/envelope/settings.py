from __future__ import annotations

import threading
from dataclasses import dataclass

from typing_extensions import Literal

_GLOBAL_ENVELOPE_SETTINGS: EnvelopeSettings | None = None
_SETTINGS_LOCK = threading.RLock()

NilPolicy = Literal["passthrough", "raise"]
"""How a DefaultSerializer treats a missing object that is not wrapped in an array."""


@dataclass(frozen=True)
class EnvelopeSettings:
    """Configuration settings for envelope."""

    default_meta_key: str = "meta"
    """
    Key under which an entity's metadata is merged next to its root key.

    Entities may override this per type or per instance through ``meta_key``.
    """

    nil_policy: NilPolicy = "passthrough"
    """
    Behavior of DefaultSerializer for ``None`` when ``wrap_in_array`` is not set.

    ``"passthrough"`` returns ``None`` as the envelope, ``"raise"`` raises
    UnserializableObjectError.
    """


def get_global_settings() -> EnvelopeSettings:
    """
    Get the global envelope settings instance (thread-safe).

    If no global settings have been set, returns a default instance.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_ENVELOPE_SETTINGS
        if _GLOBAL_ENVELOPE_SETTINGS is None:
            _GLOBAL_ENVELOPE_SETTINGS = EnvelopeSettings()
        return _GLOBAL_ENVELOPE_SETTINGS


def set_global_settings(settings: EnvelopeSettings) -> None:
    """
    Set the global envelope settings instance (thread-safe).

    Args:
        settings (EnvelopeSettings): Settings to set as global.
    """
    with _SETTINGS_LOCK:
        global _GLOBAL_ENVELOPE_SETTINGS
        _GLOBAL_ENVELOPE_SETTINGS = settings
