"""Activation and deactivation of the integration."""

import logging

logger = logging.getLogger(__name__)


def activate(store):
    """Initialize the settings record with its defaults."""
    store.reset()
    logger.info("Mailchimp settings %r initialized", store.name)


def deactivate(store):
    """Remove the settings record."""
    store.clear()
    logger.info("Mailchimp settings %r removed", store.name)
