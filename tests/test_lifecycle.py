"""Tests for the activation and deactivation hooks."""

from io import StringIO

import pytest
from django.core.management import call_command

from unofficial_mailchimp.lifecycle import activate, deactivate
from unofficial_mailchimp.models import Option
from unofficial_mailchimp.store import DEFAULT_OPTION_NAME, Settings


def test_activate_resets_settings(memory_store):
    """Activation stores the defaults over any previous record."""
    memory_store.put(Settings(key="abc12345-us1", list_id="list-1"))

    activate(memory_store)

    assert memory_store.get() == Settings()


def test_deactivate_removes_settings(memory_store):
    """Deactivation removes the record."""
    activate(memory_store)

    deactivate(memory_store)

    assert DEFAULT_OPTION_NAME not in memory_store._options.values


@pytest.mark.django_db
def test_command_activate():
    """The management command initializes the settings."""
    stdout = StringIO()

    call_command("unofficial_mailchimp", "activate", stdout=stdout)

    assert Option.objects.get_value(DEFAULT_OPTION_NAME) == {"key": "", "list_id": ""}
    assert "Mailchimp settings initialized." in stdout.getvalue()


@pytest.mark.django_db
def test_command_deactivate(store):
    """The management command removes the settings."""
    store.put(Settings(key="abc12345-us1", list_id="list-1"))

    call_command("unofficial_mailchimp", "deactivate", stdout=StringIO())

    assert not Option.objects.filter(name=DEFAULT_OPTION_NAME).exists()


@pytest.mark.django_db
def test_command_show(store):
    """The management command shows the settings with the key masked."""
    store.put(Settings(key="abc12345-us1", list_id="list-1"))
    stdout = StringIO()

    call_command("unofficial_mailchimp", "show", stdout=stdout)

    assert stdout.getvalue() == "key: abc1****-us1\nlist_id: list-1\n"
