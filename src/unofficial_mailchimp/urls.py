"""URL configuration of the unofficial Mailchimp admin page."""

from django.urls import path

from unofficial_mailchimp.views import SettingsView

urlpatterns = [
    path("settings/", SettingsView.as_view(), name="unofficial_mailchimp_settings"),
]
