"""Mailchimp Marketing API client."""

import base64
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "api.mailchimp.com"
DEFAULT_TIMEOUT = 10
API_VERSION = "3.0"


def parse_datacenter(api_key: str) -> str:
    """
    Return the datacenter encoded after the first "-" of an API key.

    "abc12345-us1" gives "us1". A key without "-" has no datacenter and gives "".
    """
    _token, separator, datacenter = (api_key or "").partition("-")
    if not separator:
        return ""
    return datacenter


def basic_auth_header(api_key: str) -> str:
    """Build the value of the Authorization header for an API key."""
    credentials = base64.b64encode(f"user:{api_key}".encode()).decode()
    return f"Basic {credentials}"


class ApiClient:
    """
    Issue authenticated calls against the Mailchimp Marketing API.

    The API key is read from the settings store before every call. Every failure
    (no key, transport error, unexpected status) is reported as `False`, callers
    must check the result.
    """

    def __init__(self, store, api_host: str | None = None, timeout: int | None = None):
        """Configure the client."""
        self._store = store
        self.api_host = api_host or getattr(settings, "UNOFFICIAL_MAILCHIMP_API_HOST", DEFAULT_API_HOST)
        self.timeout = timeout or getattr(settings, "UNOFFICIAL_MAILCHIMP_TIMEOUT", DEFAULT_TIMEOUT)

    def build_url(self, api_key: str, resource: str) -> str:
        """Return the endpoint URL of a resource for the datacenter of the key."""
        return f"https://{parse_datacenter(api_key)}.{self.api_host}/{API_VERSION}{resource}"

    def call(self, method: str, resource: str, body: dict | None = None):
        """
        Call the API and return the decoded response.

        Args:
            method: HTTP verb
            resource: resource path, starting with "/"
            body: fields sent in the JSON body

        Returns:
            The decoded JSON body, True for an empty successful response,
            or False when the call failed.

        Note:
            Any status in [200, 400) is a success, redirections included.

        """
        api_key = self._store.get().key
        if not api_key:
            logger.info("Mailchimp API key is not configured, skipping %s %s", method, resource)
            return False

        if not parse_datacenter(api_key):
            logger.warning("Mailchimp API key has no datacenter suffix, skipping %s %s", method, resource)
            return False

        url = self.build_url(api_key, resource)
        headers = {
            "Content-Type": "application/json",
            "Authorization": basic_auth_header(api_key),
        }
        # the apikey field is redundant with the Authorization header
        payload = {"apikey": api_key, **(body or {})}

        try:
            response = requests.request(method, url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as err:
            logger.warning("Mailchimp request %s %s failed: %s", method, resource, err)
            return False

        if settings.DEBUG:
            logger.debug(
                "Mailchimp response to %s %s: status=%s headers=%s body=%s",
                method,
                url,
                response.status_code,
                dict(response.headers),
                response.text,
            )

        if not 200 <= response.status_code < 400:  # noqa: PLR2004
            logger.warning("Mailchimp request %s %s returned status %s", method, resource, response.status_code)
            return False

        if not response.content:
            return True

        try:
            return response.json()
        except ValueError:
            logger.warning("Mailchimp response to %s %s is not valid JSON", method, resource)
            return False
