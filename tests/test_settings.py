"""Tests for global settings."""

import dataclasses

import pytest

from envelope.settings import EnvelopeSettings
from envelope.settings import get_global_settings
from envelope.settings import set_global_settings


class TestSettings:
    """Tests for EnvelopeSettings and the global accessors."""

    def test_defaults(self):
        """Test the default values."""
        settings = get_global_settings()
        assert settings.default_meta_key == "meta"
        assert settings.nil_policy == "passthrough"

    def test_set_global(self):
        """Test replacing the global settings."""
        custom = EnvelopeSettings(default_meta_key="info", nil_policy="raise")
        set_global_settings(custom)
        assert get_global_settings() is custom

    def test_frozen(self):
        """Test that settings are immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_global_settings().default_meta_key = "other"  # type: ignore[misc]
