"""Management command running the lifecycle hooks of the integration."""

from django.core.management.base import BaseCommand

from unofficial_mailchimp.lifecycle import activate, deactivate
from unofficial_mailchimp.obfuscation import obfuscate
from unofficial_mailchimp.store import get_settings_store


class Command(BaseCommand):
    """Activate, deactivate or show the Mailchimp settings."""

    help = "Activate, deactivate or show the unofficial Mailchimp API settings."

    def add_arguments(self, parser):
        """Declare the action argument."""
        parser.add_argument("action", choices=["activate", "deactivate", "show"])

    def handle(self, *args, **options):
        """Run the requested action on the settings store."""
        store = get_settings_store()
        action = options["action"]

        if action == "activate":
            activate(store)
            self.stdout.write(self.style.SUCCESS("Mailchimp settings initialized."))
        elif action == "deactivate":
            deactivate(store)
            self.stdout.write(self.style.SUCCESS("Mailchimp settings removed."))
        else:
            current = store.get()
            self.stdout.write(f"key: {obfuscate(current.key)}")
            self.stdout.write(f"list_id: {current.list_id}")
