from timesheet.fastapi.schemas.clock_record import (
    ClockRecordRead,
    ClockActionRequest,
    ClockActionResponse,
    ClockStatusResponse,
    HealthResponse,
    ErrorResponse
)
