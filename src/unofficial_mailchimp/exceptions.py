"""Unofficial Mailchimp exceptions module."""


class MailchimpError(Exception):
    """Base exception for all Mailchimp exceptions."""


class MemberUpsertError(MailchimpError):
    """Exception raised when the list member cannot be created or updated."""
