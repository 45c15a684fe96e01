from fastapi import FastAPI
from timesheet.fastapi.api.v1.endpoints import base, doc, clock

def setup_routers(app: FastAPI):
    # Main and documentation routes
    app.include_router(base.router, prefix="", tags=["main"])
    app.include_router(doc.router, prefix="", tags=["doc"])

    # Time tracking routes
    app.include_router(clock.router, prefix="/api", tags=["time-tracking"])
