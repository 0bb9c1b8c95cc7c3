"""Tests for DefaultSerializer."""

import pytest

from envelope import DefaultSerializer
from envelope import UnserializableObjectError
from envelope.settings import EnvelopeSettings
from envelope.settings import set_global_settings

ENTRY_POINTS = ["as_json", "serializable_hash", "serializable_object"]


class Widget:
    """Object defining its own bare representation."""

    def __init__(self, name):
        self.name = name
        self.calls = 0

    def as_json(self):
        self.calls += 1
        return {"widget": self.name}


class Exploding:
    def as_json(self):
        raise ValueError("cannot serialize")


class TestWrapInArray:
    """Tests for the wrap_in_array policy."""

    def test_none_wrapped_is_empty_list(self):
        """Test that None with wrap_in_array yields [] rather than [None]."""
        assert DefaultSerializer(None, {"wrap_in_array": True}).as_json() == []

    def test_none_wrapped_short_circuits(self):
        """Test that the empty list is returned even when nil_policy would raise."""
        set_global_settings(EnvelopeSettings(nil_policy="raise"))
        assert DefaultSerializer(None, {"wrap_in_array": True}).as_json() == []

    def test_object_wrapped_in_single_element_list(self):
        """Test that a non-None object becomes a one-element list."""
        widget = Widget("gear")
        assert DefaultSerializer(widget, {"wrap_in_array": True}).as_json() == [{"widget": "gear"}]
        assert widget.calls == 1

    def test_legacy_option_key(self):
        """Test that the underscored option key is honored."""
        assert DefaultSerializer(None, {"_wrap_in_array": True}).as_json() == []

    def test_default_is_unwrapped(self):
        """Test that wrap_in_array defaults to False."""
        serializer = DefaultSerializer(Widget("gear"))
        assert serializer.wrap_in_array is False
        assert serializer.as_json() == {"widget": "gear"}

    def test_list_object_is_not_double_wrapped_by_default(self):
        """Test that list objects are converted element-wise without extra nesting."""
        assert DefaultSerializer([1, 2]).as_json() == [1, 2]
        assert DefaultSerializer([1, 2], {"wrap_in_array": True}).as_json() == [[1, 2]]


class TestEntryPoints:
    """Tests for the aliased entry points."""

    @pytest.mark.parametrize("method", ENTRY_POINTS)
    def test_aliases_identical(self, method):
        """Test that every entry point produces the same envelope."""
        serializer = DefaultSerializer({"id": 1, "tags": ("a",)})
        assert getattr(serializer, method)() == {"id": 1, "tags": ["a"]}

    @pytest.mark.parametrize("method", ENTRY_POINTS)
    def test_aliases_wrap_none(self, method):
        """Test that every entry point applies the array policy."""
        serializer = DefaultSerializer(None, {"wrap_in_array": True})
        assert getattr(serializer, method)() == []

    @pytest.mark.parametrize("method", ENTRY_POINTS)
    def test_root_option_ignored(self, method):
        """Test that root options never wrap the default envelope."""
        serializer = DefaultSerializer(Widget("gear"))
        assert getattr(serializer, method)({"root": "widget"}) == {"widget": "gear"}


class TestNilPolicy:
    """Tests for None without wrap_in_array."""

    def test_passthrough_returns_none(self):
        """Test that the default policy returns None."""
        assert DefaultSerializer(None).as_json() is None

    def test_raise_policy(self):
        """Test that the raise policy fails fast."""
        set_global_settings(EnvelopeSettings(nil_policy="raise"))
        with pytest.raises(UnserializableObjectError, match="without wrap_in_array"):
            DefaultSerializer(None).as_json()


class TestErrors:
    """Tests for error propagation."""

    def test_object_errors_propagate_unmodified(self):
        """Test that errors from the object's own as_json are not wrapped."""
        with pytest.raises(ValueError, match="cannot serialize"):
            DefaultSerializer(Exploding()).as_json()

    def test_unserializable_object(self):
        """Test that objects without a representation raise UnserializableObjectError."""
        with pytest.raises(UnserializableObjectError, match="object"):
            DefaultSerializer(object()).as_json()

    def test_unserializable_is_type_error(self):
        """Test that UnserializableObjectError can be caught as TypeError."""
        with pytest.raises(TypeError):
            DefaultSerializer(object()).as_json()


class TestMisc:
    """Tests for construction details."""

    def test_repr(self):
        """Test the concise repr."""
        serializer = DefaultSerializer("abc", {"wrap_in_array": True})
        assert repr(serializer) == "DefaultSerializer(object='abc', wrap_in_array=True)"

    def test_no_root_or_meta(self):
        """Test that the default serializer has no root key or metadata."""
        serializer = DefaultSerializer({"id": 1})
        assert serializer.json_key is None
        assert serializer.serializable_data() == {}

    def test_injected_namespace_cache(self, namespace_cache):
        """Test that the namespace cache can be injected at construction."""
        serializer = DefaultSerializer({"id": 1}, namespace_cache=namespace_cache)
        assert serializer.namespace_cache is namespace_cache
        assert serializer.namespace().__name__ == "envelope.default_serializer"
