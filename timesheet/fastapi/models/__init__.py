from timesheet.fastapi.models.clock_record import ClockRecord, OPEN_SESSION_INDEX
