"""Conftest for all pytest configuration - fixtures, hooks, and doctest setup."""

import doctest

import pytest

from envelope.namespaces import NamespaceCache
from envelope.namespaces import set_namespace_cache
from envelope.plugins.manager import _initialize_plugin_system
from envelope.settings import EnvelopeSettings
from envelope.settings import set_global_settings

# Doctest Configuration


def pytest_configure(config):
    """Configure pytest with custom doctest options."""
    doctest.ELLIPSIS_MARKER = "..."


def pytest_collection_modifyitems(items):
    """Automatically mark doctest items with the 'doctest' marker."""
    for item in items:
        if isinstance(item, pytest.DoctestItem):
            item.add_marker(pytest.mark.doctest)


# Fixtures


@pytest.fixture(autouse=True)
def isolated_globals():
    """Give every test a fresh namespace cache, default settings and plugin manager."""
    set_namespace_cache(None)
    set_global_settings(EnvelopeSettings())
    _initialize_plugin_system()
    yield
    set_namespace_cache(None)
    set_global_settings(EnvelopeSettings())
    _initialize_plugin_system()


@pytest.fixture
def namespace_cache():
    """A private namespace cache, isolated from the process-wide one."""
    return NamespaceCache()
