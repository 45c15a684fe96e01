"""
Pydantic schemas for ClockRecord serialization and the response envelope.

Every response shares the envelope ``{success, message?, data?, status?}``;
the schemas below describe each endpoint's variant of it.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ClockRecordRead(BaseModel):
    """Schema for reading a clock record."""

    id: int = Field(..., description="Clock record unique identifier")
    email: str = Field(..., description="Email of the worker", examples=["a@b.com"])
    clock_in_time: datetime = Field(..., description="When the worker clocked in")
    clock_out_time: Optional[datetime] = Field(
        None,
        description="When the worker clocked out (null while clocked in)"
    )
    created_at: Optional[datetime] = Field(None, description="Record creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Record last update timestamp")

    model_config = ConfigDict(from_attributes=True)


class ClockActionRequest(BaseModel):
    """Schema for clock-in/out request bodies."""

    email: str = Field(
        ...,
        description="Email of the worker; must contain '@'",
        examples=["a@b.com"]
    )


class ClockActionResponse(BaseModel):
    """Response schema for clock-in/out operations."""

    success: bool = Field(..., description="Whether operation was successful")
    message: str = Field(..., description="Operation result message")
    data: ClockRecordRead = Field(..., description="Created or updated clock record")


class ClockStatusResponse(BaseModel):
    """Response schema for status lookups."""

    success: bool = Field(..., description="Whether operation was successful")
    status: Literal["clocked-in", "clocked-out"] = Field(
        ...,
        description="Worker's current clock status"
    )
    data: Optional[ClockRecordRead] = Field(
        None,
        description="Open record when clocked in, latest record otherwise (null without history)"
    )


class HealthResponse(BaseModel):
    """Response schema for the health check."""

    success: bool = Field(True, description="Always true")
    message: str = Field(..., description="Service state", examples=["API is running"])
    timestamp: datetime = Field(..., description="Current server time")


class ErrorResponse(BaseModel):
    """Failure envelope shared by every endpoint."""

    success: bool = Field(False, description="Always false")
    message: str = Field(..., description="Failure reason")
    data: Optional[ClockRecordRead] = Field(
        None,
        description="Existing open record (only for 'already clocked in')"
    )
