"""Settings form of the Mailchimp admin page."""

from django import forms
from django.utils.translation import gettext_lazy as _

from unofficial_mailchimp.obfuscation import is_obfuscated, obfuscate


class SettingsForm(forms.Form):
    """
    Edit the Mailchimp API key and the list new members are added to.

    The key is displayed masked. Submitting the masked value back keeps the
    stored key, anything else replaces it.

    Fields are sanitized in order and sanitization stops at the first missing
    one: `sanitized` then only holds the fields collected before the error, and
    that partial record is what `save` persists.
    """

    key = forms.CharField(
        label=_("API Key*"),
        required=False,
        help_text=_(
            "To find your API keys head to your Mailchimp dashboard and click "
            "Your username > Account > Extras > API keys."
        ),
        widget=forms.TextInput(attrs={"class": "vTextField"}),
    )
    list_id = forms.CharField(label=_("List ID*"), required=False)

    def __init__(self, *args, store, lists=None, **kwargs):
        """
        Bind the form to the settings store.

        `lists` is the result of `ListService.fetch_lists`: None when there is
        no API key to fetch them with, False when fetching failed.
        """
        self._store = store
        self._current = store.get()
        kwargs.setdefault("initial", {"key": obfuscate(self._current.key), "list_id": self._current.list_id})
        super().__init__(*args, **kwargs)
        self.sanitized = {}
        self.set_lists(lists)

    def set_lists(self, lists):
        """Configure the list field from the result of a lists fetch."""
        field = self.fields["list_id"]
        field.disabled = lists is None
        field.help_text = ""
        if lists is None:
            field.widget = forms.Select(choices=[(_("Subscriber lists"), [])])
            field.help_text = _("Fill in your API key to have your lists listed here.")
        elif lists is False:
            field.widget = forms.TextInput(attrs={"class": "vTextField"})
        else:
            choices = [("", "")] + [(mailing_list.id, mailing_list.name) for mailing_list in lists]
            field.widget = forms.Select(choices=choices)

    def clean(self):
        """Collect the sanitized record, stopping at the first missing field."""
        cleaned_data = super().clean()
        self.sanitized = {}

        key = cleaned_data.get("key")
        if not key:
            self.add_error("key", _("API Key is required"))
            return cleaned_data

        self.sanitized["key"] = self._current.key if is_obfuscated(key) else key

        list_id = cleaned_data.get("list_id")
        if not list_id:
            self.add_error("list_id", _("List ID is required"))
            return cleaned_data

        self.sanitized["list_id"] = list_id
        return cleaned_data

    def save(self):
        """Persist the sanitized record, even a partial one."""
        self._store.put(self.sanitized)
