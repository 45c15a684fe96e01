"""
Request dependencies for the clock endpoints.

This module provides the email validator applied to clock-in/out bodies
and the store dependency that hands each request its own CRUD instance.
"""

import json
import logging

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from timesheet.fastapi.core.exceptions import EmailValidationError
from timesheet.fastapi.core.utils import is_valid_email
from timesheet.fastapi.crud.clock_record import ClockRecordCRUD
from timesheet.fastapi.dependencies.database import get_db

logger = logging.getLogger(__name__)


async def validated_email(request: Request) -> str:
    """
    Extract and validate the email from a JSON request body.

    Args:
        request: Incoming request

    Returns:
        Email string containing "@"

    Raises:
        EmailValidationError: If the body is not a JSON object or the email
            is missing, not a string, or has no "@"

    Usage:
        @router.post("/clock-in")
        async def clock_in(email: str = Depends(validated_email)):
            ...
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug("Rejected request with unreadable body on %s", request.url.path)
        raise EmailValidationError()

    email = body.get("email") if isinstance(body, dict) else None
    if not is_valid_email(email):
        raise EmailValidationError()
    return email


def get_clock_store(db: AsyncSession = Depends(get_db)) -> ClockRecordCRUD:
    """Store dependency bound to the request's database session."""
    return ClockRecordCRUD(db)


# Dependency shortcuts
RequireValidEmail = Depends(validated_email)
ClockStore = Depends(get_clock_store)
