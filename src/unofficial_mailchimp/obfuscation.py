"""Masking of the Mailchimp API key for display."""

MASK_CHAR = "*"
VISIBLE_CHARS = 4


def obfuscate(api_key: str) -> str:
    """
    Mask the token part of an API key, keeping its datacenter suffix.

    "abc12345-us1" becomes "abc1****-us1". Tokens of 4 characters or less are
    left visible, and keys without "-" are returned without a suffix.
    """
    if not api_key:
        return api_key

    token, separator, datacenter = api_key.partition("-")
    masked = token[:VISIBLE_CHARS] + MASK_CHAR * max(len(token) - VISIBLE_CHARS, 0)
    return f"{masked}{separator}{datacenter}"


def is_obfuscated(api_key: str) -> bool:
    """Tell whether the value is a masked key rather than a real one."""
    return MASK_CHAR in (api_key or "")
