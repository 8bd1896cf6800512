"""Mailchimp tasks module."""

import logging

from celery import shared_task

from unofficial_mailchimp.exceptions import MemberUpsertError
from unofficial_mailchimp.services import MemberService
from unofficial_mailchimp.store import get_settings_store

logger = logging.getLogger(__name__)


def subscribe_member(email: str, fields: dict | None = None, store=None):
    """
    Add or update an email address on the configured mailing list.

    Args:
        email: Email address of the member
        fields: Extra member fields sent to Mailchimp
        store: Settings store, the database one by default

    Returns:
        dict | bool: Mailchimp response, True when Mailchimp answered without a body

    Raises:
        MemberUpsertError: If Mailchimp is not configured or the call failed

    """
    result = MemberService(store or get_settings_store()).upsert_member(email, fields)
    if result is False:
        raise MemberUpsertError("Failed to add member to the Mailchimp list")
    logger.info("Mailchimp list member added or updated")
    return result


@shared_task
def subscribe(email: str, fields: dict | None = None):
    """Add or update an email address on the configured mailing list."""
    return subscribe_member(email, fields)
