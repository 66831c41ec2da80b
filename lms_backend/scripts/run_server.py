#!/usr/bin/env python3
"""
Start the assessments API under uvicorn.

HOST, PORT and RELOAD are read from the environment; everything else comes
from the application settings.

Usage:
    python -m lms_backend.scripts.run_server
"""

import os

import uvicorn

from lms_backend.common.logger import app_logger
from lms_backend.config import settings

logger = app_logger.getChild("scripts.run_server")


def main():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 8000))
    reload_enabled = os.getenv("RELOAD", "false").lower() == "true"

    logger.info(
        f"Starting {settings.PROJECT_NAME} on {host}:{port} "
        f"(storage: {settings.STORAGE_BACKEND}, reload: {reload_enabled})"
    )
    uvicorn.run(
        "lms_backend.main:app",
        host=host,
        port=port,
        reload=reload_enabled,
        log_level=settings.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    main()
