"""
Bare representations for arbitrary Python objects.

``object_as_json`` is the seam where an object defines its own serialization:
anything exposing ``as_json()`` is trusted to build its own representation,
built-in values pass through, and common containers and value types are
converted to JSON-compatible primitives.
"""

from __future__ import annotations

import dataclasses
import datetime
import decimal
import enum
import uuid
from collections.abc import Mapping
from typing import Any

from envelope.exceptions import UnserializableObjectError

_PASSTHROUGH_TYPES = (str, int, float, bool, type(None))


def object_as_json(obj: Any) -> Any:
    """
    Convert ``obj`` to its bare JSON-compatible representation.

    Errors raised by an object's own ``as_json`` propagate unchanged.

    Args:
        obj: Value to convert.

    Returns:
        A primitive, ``dict`` or ``list``.

    Raises:
        UnserializableObjectError: If ``obj`` has no known representation.

    Examples:
        >>> object_as_json({"id": 1, "tags": ("a", "b")})
        {'id': 1, 'tags': ['a', 'b']}
        >>> object_as_json(datetime.date(2024, 1, 31))
        '2024-01-31'
    """
    as_json = getattr(obj, "as_json", None)
    if callable(as_json) and not isinstance(obj, type):
        return as_json()

    if isinstance(obj, enum.Enum):
        return object_as_json(obj.value)

    if isinstance(obj, _PASSTHROUGH_TYPES):
        return obj

    if isinstance(obj, Mapping):
        return {str(key): object_as_json(value) for key, value in obj.items()}

    if isinstance(obj, (list, tuple)):
        return [object_as_json(item) for item in obj]

    if isinstance(obj, (set, frozenset)):
        return [object_as_json(item) for item in sorted(obj, key=repr)]

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return object_as_json(dataclasses.asdict(obj))

    if isinstance(obj, (datetime.datetime, datetime.date, datetime.time)):
        return obj.isoformat()

    if isinstance(obj, (decimal.Decimal, uuid.UUID)):
        return str(obj)

    raise UnserializableObjectError(
        f"Object of type {type(obj).__name__} has no bare representation; "
        "define as_json() on it or wrap it in a Serializable"
    )
