"""Mailing lists and list members on top of the API client."""

import hashlib
import logging
from dataclasses import dataclass

from unofficial_mailchimp.client import ApiClient

logger = logging.getLogger(__name__)


@dataclass
class MailingList:
    """A Mailchimp audience, as returned by the lists endpoint."""

    id: str
    name: str


def subscriber_hash(email: str) -> str:
    """Return the Mailchimp member identifier of an email address."""
    return hashlib.md5(email.lower().encode()).hexdigest()  # noqa: S324


class ListService:
    """Fetch the mailing lists of the configured account."""

    def __init__(self, store, client: ApiClient | None = None):
        """Use the given client, or one reading its key from the store."""
        self._client = client or ApiClient(store)

    def fetch_lists(self):
        """Return the account mailing lists, or False when the call failed."""
        result = self._client.call("GET", "/lists")
        if result is False:
            return False
        if not isinstance(result, dict):
            return []
        return [MailingList(id=str(item["id"]), name=item.get("name", "")) for item in result.get("lists", [])]


class MemberService:
    """Create or update members of the configured mailing list."""

    def __init__(self, store, client: ApiClient | None = None):
        """Use the given client, or one reading its key from the store."""
        self._store = store
        self._client = client or ApiClient(store)

    def upsert_member(self, email: str, fields: dict | None = None):
        """
        Create or update a list member from its email address.

        The email is not validated here, Mailchimp does it.

        Returns:
            The API result, or False when no list is configured or the call failed.

        """
        list_id = self._store.get().list_id
        if not list_id:
            logger.warning("Mailchimp list is not configured, cannot add %s", email)
            return False

        resource = f"/lists/{list_id}/members/{subscriber_hash(email)}"
        return self._client.call("POST", resource, {"email": email, **(fields or {})})
