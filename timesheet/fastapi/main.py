from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from timesheet.fastapi.core.config import Settings
from timesheet.fastapi.core.exceptions import TimesheetError
from timesheet.fastapi.core.lifespan import lifespan
from timesheet.fastapi.core.logging import setup_logging
from timesheet.fastapi.core.middleware import setup_cors
from timesheet.fastapi.core.routers import setup_routers
from timesheet.fastapi.schemas.clock_record import ClockRecordRead


async def timesheet_error_handler(request: Request, exc: TimesheetError):
    content = {"success": False, "message": exc.message}
    if exc.data is not None:
        content["data"] = jsonable_encoder(ClockRecordRead.model_validate(exc.data))
    return JSONResponse(status_code=exc.status_code, content=content)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        from timesheet.fastapi.core.init_settings import global_settings
        settings = global_settings

    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url="/openapi.json"
    )
    app.state.settings = settings

    setup_cors(app, settings)
    app.add_exception_handler(TimesheetError, timesheet_error_handler)
    setup_routers(app)

    return app


app = create_app()
