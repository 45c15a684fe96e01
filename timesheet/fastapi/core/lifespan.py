import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from timesheet.fastapi.dependencies.database import create_engine, create_session_factory, init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings

    # Initialize the store client shared by every request
    engine = create_engine(settings.ASYNC_DB_URL)
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    logger.info("Store engine ready: %s", settings.SAFE_DB_URL)

    if settings.AUTO_CREATE_TABLES:
        await init_db(engine)
        logger.info("clock_records table ready")

    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Store engine disposed")
