from fastapi import APIRouter

from timesheet.fastapi.core.utils import utcnow
from timesheet.fastapi.schemas.clock_record import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health():
    """Report that the API is running, with the current server time."""
    return HealthResponse(success=True, message="API is running", timestamp=utcnow())
