"""
Exceptions raised by the timesheet API.

Every exception derives from ``TimesheetError``; a single handler registered
in ``main.create_app`` renders them into the failure envelope
``{"success": false, "message": ..., "data": ...}``.
"""

from typing import Any, Optional

from fastapi import status


class TimesheetError(Exception):
    """Base exception carrying the HTTP status and envelope message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, data: Any = None):
        self.message = message or self.message
        self.data = data
        super().__init__(self.message)


class EmailValidationError(TimesheetError):
    """Raised when the request body carries no usable email."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Valid email is required"


class AlreadyClockedInError(TimesheetError):
    """Raised when clocking in while an open session exists."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "User is already clocked in"

    def __init__(self, record: Any):
        super().__init__(data=record)
        self.record = record


class NoActiveClockInError(TimesheetError):
    """Raised when clocking out without an open session."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "No active clock-in found for this user"


class StoreError(TimesheetError):
    """Raised by endpoints when the store fails; the cause is logged, not returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
