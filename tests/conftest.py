"""Fixtures for the test suite."""

import pytest

from unofficial_mailchimp.store import Settings, SettingsStore, get_settings_store


class InMemoryOptions:
    """Option storage keeping values in a dict."""

    def __init__(self):
        """Start empty."""
        self.values = {}

    def get_value(self, name, default=None):
        """Return the value stored under `name`."""
        return self.values.get(name, default)

    def set_value(self, name, value):
        """Store a value under `name`."""
        self.values[name] = value

    def delete_value(self, name):
        """Remove the value stored under `name`."""
        return self.values.pop(name, None) is not None


@pytest.fixture
def memory_store():
    """Return a settings store which does not touch the database."""
    return SettingsStore(InMemoryOptions())


@pytest.fixture
def configured_store(memory_store):
    """Return an in-memory store holding an API key and a list."""
    memory_store.put(Settings(key="abc12345-us1", list_id="list-1"))
    return memory_store


@pytest.fixture
def store(db):
    """Return the database backed settings store."""
    return get_settings_store()
