"""
Utility functions shared by the store layer and the endpoints.

This module provides the clock used for every timestamp written by the API
and the email shape check applied to clock-in/out requests.
"""

from datetime import datetime, timezone
from typing import Any


def utcnow() -> datetime:
    """
    Current time as a timezone-aware UTC datetime.

    Wrapped so the clock can be patched in tests.
    """
    return datetime.now(timezone.utc)


def is_valid_email(email: Any) -> bool:
    """
    Check that a value can be used as a worker email.

    Only presence and the "@" character are checked:
        "a@b.com" -> True
        "bad" -> False
        "" -> False
        None -> False

    Args:
        email: Raw value taken from the request body

    Returns:
        True if the value is a non-empty string containing "@"
    """
    if not email or not isinstance(email, str):
        return False
    return "@" in email
