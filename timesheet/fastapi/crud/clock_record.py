"""
ClockRecord CRUD operations.

This module provides the store operations behind clock-in, clock-out and
status lookups. Both writes are single conditional statements: the partial
unique index on open sessions rejects a second open row, and clock-out only
updates a row whose clock_out_time is still NULL.
"""

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from timesheet.fastapi.core.exceptions import AlreadyClockedInError, NoActiveClockInError
from timesheet.fastapi.core.utils import utcnow
from timesheet.fastapi.models.clock_record import ClockRecord

logger = logging.getLogger(__name__)


class ClockRecordCRUD:
    """CRUD operations for ClockRecord model."""

    def __init__(self, db: AsyncSession):
        """Initialize with database session."""
        self.db = db

    async def get_open_record(self, email: str) -> Optional[ClockRecord]:
        """
        Get the open session for a worker.

        Args:
            email: Worker email

        Returns:
            Open ClockRecord or None if the worker is not clocked in

        Raises:
            MultipleResultsFound: If more than one open session exists
        """
        stmt = select(ClockRecord).where(
            ClockRecord.email == email,
            ClockRecord.clock_out_time.is_(None)
        )
        result = await self.db.execute(stmt)
        try:
            return result.scalar_one()
        except NoResultFound:
            return None

    async def get_latest_record(self, email: str) -> Optional[ClockRecord]:
        """
        Get the most recently created record for a worker.

        Args:
            email: Worker email

        Returns:
            Latest ClockRecord or None if the worker has no history
        """
        stmt = (
            select(ClockRecord)
            .where(ClockRecord.email == email)
            .order_by(ClockRecord.created_at.desc(), ClockRecord.id.desc())
            .limit(1)
        )
        result = await self.db.execute(stmt)
        try:
            return result.scalar_one()
        except NoResultFound:
            return None

    async def clock_in(self, email: str, now: Optional[datetime] = None) -> ClockRecord:
        """
        Open a new session for a worker.

        The insert is attempted directly; when an open session already exists
        the unique index rejects it and the existing session is reported.

        Args:
            email: Worker email
            now: Clock-in time (defaults to current time)

        Returns:
            Created ClockRecord

        Raises:
            AlreadyClockedInError: If the worker already has an open session
        """
        now = now or utcnow()
        record = ClockRecord(
            email=email,
            clock_in_time=now,
            created_at=now,
            updated_at=now
        )

        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            existing = await self.get_open_record(email)
            if existing is None:
                # Not the open-session index; surface as a store failure
                raise
            logger.info("Rejected clock-in for %s: session %s still open", email, existing.id)
            raise AlreadyClockedInError(existing)

        logger.info("Clocked in %s (record %s)", email, record.id)
        return record

    async def clock_out(self, email: str, now: Optional[datetime] = None) -> ClockRecord:
        """
        Close the open session for a worker.

        Args:
            email: Worker email
            now: Clock-out time (defaults to current time)

        Returns:
            Updated ClockRecord

        Raises:
            NoActiveClockInError: If the worker has no open session
        """
        now = now or utcnow()
        stmt = (
            update(ClockRecord)
            .where(
                ClockRecord.email == email,
                ClockRecord.clock_out_time.is_(None)
            )
            .values(clock_out_time=now, updated_at=now)
            .returning(ClockRecord)
        )
        result = await self.db.execute(stmt)
        try:
            record = result.scalar_one()
        except NoResultFound:
            await self.db.rollback()
            raise NoActiveClockInError()

        await self.db.commit()
        logger.info("Clocked out %s (record %s)", email, record.id)
        return record
