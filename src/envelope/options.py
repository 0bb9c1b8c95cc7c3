"""Per-call serialization options with a presence-sensitive ``root`` key."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from typing_extensions import TypeAlias, final


@final
class Unset:
    """Sentinel type marking an option that was not supplied at all."""

    _instance: Unset | None = None

    def __new__(cls) -> Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNSET"


UNSET = Unset()
"""Singleton sentinel: the option was not supplied (distinct from ``None``)."""

RootOption: TypeAlias = Union[str, None, bool, Unset]
"""A root key, ``None``/``False`` to suppress wrapping, or ``UNSET`` to use the default."""


@dataclass(frozen=True)
class SerializationOptions(Mapping[str, Any]):
    """
    Options recognized by ``as_json``.

    ``root`` is tri-state: ``UNSET`` falls back to the entity's ``json_key``,
    a falsy value (``None`` or ``False``) suppresses root wrapping, and a string
    is used as the root key. Any other keys are kept in ``extra`` and handed to
    the entity's bare representation untouched. The options read like the
    mapping they were built from, with ``root`` present only when supplied.

    Examples:
        >>> options = SerializationOptions.coerce({"only": ["id"]})
        >>> "only" in options, "root" in options, dict(options)
        (True, False, {'only': ['id']})
        >>> SerializationOptions.coerce({}).root_supplied
        False
        >>> SerializationOptions.coerce({"root": None}).root_supplied
        True
        >>> SerializationOptions.coerce({"root": "item", "only": ["id"]}).extra
        {'only': ['id']}
    """

    root: RootOption = UNSET
    extra: Mapping[str, Any] = field(default_factory=dict)

    @property
    def root_supplied(self) -> bool:
        """Whether ``root`` was given explicitly, even as ``None``."""
        return self.root is not UNSET

    def resolve_root(self, default: Any) -> Any:
        """Return the explicit root if supplied, otherwise ``default``."""
        return self.root if self.root_supplied else default

    def __getitem__(self, key: str) -> Any:
        if key == "root":
            if self.root_supplied:
                return self.root
            raise KeyError(key)
        return self.extra[key]

    def __iter__(self) -> Iterator[str]:
        if self.root_supplied:
            yield "root"
        yield from (key for key in self.extra if key != "root")

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @classmethod
    def coerce(cls, options: SerializationOptions | Mapping[str, Any] | None) -> SerializationOptions:
        """
        Build options from ``None``, a mapping, or an existing instance.

        Key presence in a mapping is preserved: ``{"root": None}`` suppresses
        wrapping while ``{}`` leaves the default root in place.
        """
        if options is None:
            return cls()
        if isinstance(options, SerializationOptions):
            return options
        if not isinstance(options, Mapping):
            raise TypeError(
                f"options must be a mapping or SerializationOptions, got {type(options).__name__}"
            )

        extra = {key: value for key, value in options.items() if key != "root"}
        if "root" in options:
            return cls(root=options["root"], extra=extra)
        return cls(extra=extra)
