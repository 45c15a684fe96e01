"""
ClockRecord model for storing one row per work session.

This module defines the SQLAlchemy model for the clock_records table.
A row is created open by a clock-in and closed exactly once by a
clock-out, when clock_out_time is set.
"""

from datetime import timezone

from sqlalchemy import Column, DateTime, Index, Integer, String, text
from sqlalchemy.types import TypeDecorator

from timesheet.fastapi.core.utils import utcnow
from timesheet.fastapi.dependencies.database import Base


OPEN_SESSION_INDEX = "ux_clock_records_one_open_per_email"


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware timestamp that always loads as UTC.

    SQLite drops tzinfo on storage; naive values read back are UTC by
    construction, since every timestamp is written by utcnow().
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class ClockRecord(Base):
    """
    Clock record model for a single work session.

    Attributes:
        id: Server-assigned identifier
        email: Worker identifier, repeated across sessions
        clock_in_time: When the session started (never changed)
        clock_out_time: When the session ended (NULL while open)
        created_at: Row creation timestamp
        updated_at: Last modification timestamp
    """

    __tablename__ = "clock_records"
    __table_args__ = (
        # At most one open session per email
        Index(
            OPEN_SESSION_INDEX,
            "email",
            unique=True,
            postgresql_where=text("clock_out_time IS NULL"),
            sqlite_where=text("clock_out_time IS NULL"),
        ),
    )

    id = Column(
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Unique clock record identifier"
    )

    email = Column(
        String,
        nullable=False,
        index=True,
        doc="Email of the worker"
    )

    clock_in_time = Column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        doc="When the worker clocked in"
    )

    clock_out_time = Column(
        UTCDateTime(),
        nullable=True,
        doc="When the worker clocked out (NULL while the session is open)"
    )

    created_at = Column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        doc="Record creation timestamp"
    )

    updated_at = Column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        doc="Record last update timestamp"
    )

    def __repr__(self) -> str:
        """String representation of ClockRecord."""
        return f"<ClockRecord(id={self.id}, email={self.email}, in={self.clock_in_time}, out={self.clock_out_time})>"

    @property
    def is_open(self) -> bool:
        """Check if this session has not been clocked out yet."""
        return self.clock_out_time is None
