"""Persistence of the Mailchimp settings record."""

from dataclasses import asdict, dataclass, fields

from django.conf import settings as django_settings

DEFAULT_OPTION_NAME = "unofficial_mailchimp_api_settings"


@dataclass
class Settings:
    """Mailchimp API key and the list new members are added to."""

    key: str = ""
    list_id: str = ""


class SettingsStore:
    """
    Read and write the settings record through an option storage.

    The storage is anything exposing `get_value(name, default)`,
    `set_value(name, value)` and `delete_value(name)`, usually `Option.objects`.
    """

    def __init__(self, options, name: str = DEFAULT_OPTION_NAME):
        """Bind the store to an option storage and a record name."""
        self._options = options
        self.name = name

    @staticmethod
    def defaults() -> dict:
        """Return the default record."""
        return asdict(Settings())

    def get(self) -> Settings:
        """Return the stored record merged over the defaults."""
        stored = self._options.get_value(self.name, {})
        if not isinstance(stored, dict):
            stored = {}
        known = {field.name for field in fields(Settings)}
        return Settings(**{**self.defaults(), **{k: v for k, v in stored.items() if k in known}})

    def put(self, record):
        """Replace the stored record with `record` (a Settings or a mapping)."""
        if isinstance(record, Settings):
            record = asdict(record)
        self._options.set_value(self.name, dict(record))

    def reset(self):
        """Store the default record."""
        self._options.set_value(self.name, self.defaults())

    def clear(self):
        """Remove the record entirely."""
        self._options.delete_value(self.name)


def get_settings_store() -> SettingsStore:
    """Return a store backed by the Option model."""
    from unofficial_mailchimp.models import Option  # noqa: PLC0415

    name = getattr(django_settings, "UNOFFICIAL_MAILCHIMP_OPTION_NAME", DEFAULT_OPTION_NAME)
    return SettingsStore(Option.objects, name=name)
