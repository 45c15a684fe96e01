"""
Clock endpoints for clock-in/out functionality.

This module provides FastAPI endpoints for opening and closing work
sessions and for looking up a worker's current clock status.
"""

import logging

from fastapi import APIRouter

from timesheet.fastapi.core.exceptions import StoreError, TimesheetError
from timesheet.fastapi.crud.clock_record import ClockRecordCRUD
from timesheet.fastapi.dependencies.clock import ClockStore, RequireValidEmail
from timesheet.fastapi.schemas.clock_record import (
    ClockActionRequest, ClockActionResponse, ClockRecordRead,
    ClockStatusResponse, ErrorResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["time-tracking"])

# The body is read by the email validator, not by a handler parameter.
CLOCK_ACTION_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {
                "schema": ClockActionRequest.model_json_schema()
            }
        }
    }
}

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid email or invalid clock state"},
    500: {"model": ErrorResponse, "description": "Store failure"},
}


@router.post(
    "/clock-in",
    response_model=ClockActionResponse,
    responses=ERROR_RESPONSES,
    openapi_extra=CLOCK_ACTION_BODY,
    summary="Clock In"
)
async def clock_in(
    email: str = RequireValidEmail,
    store: ClockRecordCRUD = ClockStore
):
    """
    Open a work session for the worker.

    **Process:**
    1. Validates the email (must contain "@")
    2. Inserts a new open clock record
    3. Returns the created record

    **Errors:**
    - **400**: Invalid email, or already clocked in (existing record in `data`)
    - **500**: Store failure
    """
    try:
        record = await store.clock_in(email)
    except TimesheetError:
        raise
    except Exception:
        logger.exception("Clock-in error for %s", email)
        raise StoreError("Failed to clock in")

    return ClockActionResponse(
        success=True,
        message="Successfully clocked in",
        data=ClockRecordRead.model_validate(record)
    )


@router.post(
    "/clock-out",
    response_model=ClockActionResponse,
    responses=ERROR_RESPONSES,
    openapi_extra=CLOCK_ACTION_BODY,
    summary="Clock Out"
)
async def clock_out(
    email: str = RequireValidEmail,
    store: ClockRecordCRUD = ClockStore
):
    """
    Close the worker's open session.

    **Process:**
    1. Validates the email (must contain "@")
    2. Sets clock-out time on the open record
    3. Returns the updated record

    **Errors:**
    - **400**: Invalid email, or no active clock-in
    - **500**: Store failure
    """
    try:
        record = await store.clock_out(email)
    except TimesheetError:
        raise
    except Exception:
        logger.exception("Clock-out error for %s", email)
        raise StoreError("Failed to clock out")

    return ClockActionResponse(
        success=True,
        message="Successfully clocked out",
        data=ClockRecordRead.model_validate(record)
    )


@router.get(
    "/status/{email}",
    response_model=ClockStatusResponse,
    responses={500: ERROR_RESPONSES[500]},
    summary="Get Clock Status"
)
async def get_clock_status(
    email: str,
    store: ClockRecordCRUD = ClockStore
):
    """
    Get the current clock status for a worker.

    The email is taken from the path as-is.

    **Returns:**
    - `clocked-in` with the open record, or
    - `clocked-out` with the latest record (null if the worker has no history)

    **Errors:**
    - **500**: Store failure
    """
    try:
        open_record = await store.get_open_record(email)
        if open_record is not None:
            return ClockStatusResponse(
                success=True,
                status="clocked-in",
                data=ClockRecordRead.model_validate(open_record)
            )

        latest_record = await store.get_latest_record(email)
    except Exception:
        logger.exception("Status check error for %s", email)
        raise StoreError("Failed to check status")

    return ClockStatusResponse(
        success=True,
        status="clocked-out",
        data=ClockRecordRead.model_validate(latest_record) if latest_record else None
    )
