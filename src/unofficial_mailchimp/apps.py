"""Unofficial Mailchimp application configuration."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class UnofficialMailchimpConfig(AppConfig):
    """Configuration class for the unofficial Mailchimp app."""

    name = "unofficial_mailchimp"
    verbose_name = _("Unofficial Mailchimp API")
    default_auto_field = "django.db.models.BigAutoField"
