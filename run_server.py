#!/usr/bin/env python3
"""
Simple script to run the FastAPI server programmatically
"""
import uvicorn
from timesheet.fastapi.core.init_settings import global_settings

if __name__ == "__main__":
    uvicorn.run(
        "timesheet.fastapi.main:app",
        host=global_settings.HOST,
        port=global_settings.PORT,
        reload=global_settings.ENV_MODE == "dev",
        log_level=global_settings.LOG_LEVEL.lower()
    )
