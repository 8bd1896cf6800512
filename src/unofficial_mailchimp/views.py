"""Admin views of the unofficial Mailchimp app."""

import logging

from django.contrib import messages
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib.auth.decorators import permission_required
from django.shortcuts import redirect, render
from django.utils.decorators import method_decorator
from django.utils.translation import gettext_lazy as _
from django.views import View

from unofficial_mailchimp.forms import SettingsForm
from unofficial_mailchimp.services import ListService
from unofficial_mailchimp.store import get_settings_store

logger = logging.getLogger(__name__)


@method_decorator(staff_member_required, name="dispatch")
@method_decorator(permission_required("unofficial_mailchimp.change_option", raise_exception=True), name="dispatch")
class SettingsView(View):
    """Display and save the Mailchimp settings."""

    http_method_names = ["get", "post"]
    template_name = "unofficial_mailchimp/settings.html"

    def get_store(self):
        """Return the settings store."""
        return get_settings_store()

    def get_lists(self, store):
        """Fetch the mailing lists, None when there is no API key to fetch them with."""
        if not store.get().key:
            return None

        lists = ListService(store).fetch_lists()
        if lists is False:
            messages.warning(self.request, _("Unable to fetch your Mailchimp lists, check your API key."))
        return lists

    def get_form(self, store):
        """Build the settings form with the fetched lists."""
        return SettingsForm(store=store, lists=self.get_lists(store))

    def render_form(self, form):
        """Render the settings page."""
        return render(
            self.request,
            self.template_name,
            {
                "form": form,
                "title": _("Unofficial Mailchimp API Settings"),
            },
        )

    def get(self, request, *args, **kwargs):
        """Display the settings form."""
        return self.render_form(self.get_form(self.get_store()))

    def post(self, request, *args, **kwargs):
        """Validate and persist the submitted settings."""
        store = self.get_store()
        # lists are only fetched to render the form
        form = SettingsForm(request.POST, store=store, lists=[] if store.get().key else None)
        is_valid = form.is_valid()
        form.save()

        if is_valid:
            messages.success(request, _("Settings saved."))
            return redirect(request.path)

        logger.info("Mailchimp settings rejected on %s", ", ".join(form.errors))
        messages.error(request, _("Please correct the errors below."))
        form.set_lists(self.get_lists(store))
        return self.render_form(form)
