"""Option storage for the unofficial Mailchimp app."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class OptionManager(models.Manager):
    """Get, set and delete options by name."""

    def get_value(self, name, default=None):
        """Return the value stored under `name`, or `default` when missing."""
        try:
            return self.get(name=name).value
        except self.model.DoesNotExist:
            return default

    def set_value(self, name, value):
        """Create or replace the value stored under `name`."""
        self.update_or_create(name=name, defaults={"value": value})

    def delete_value(self, name):
        """Remove the option. Return True if something was deleted."""
        deleted, _per_model = self.filter(name=name).delete()
        return deleted > 0


class Option(models.Model):
    """A named configuration record."""

    name = models.CharField(_("name"), max_length=191, unique=True)
    value = models.JSONField(_("value"), default=dict, blank=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = OptionManager()

    class Meta:  # noqa: D106
        verbose_name = _("option")
        verbose_name_plural = _("options")

    def __str__(self):
        """Return the option name."""
        return self.name
