"""Unofficial Mailchimp API integration for the Django admin."""
