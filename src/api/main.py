"""
Standards service application.

Run with: uvicorn src.api.main:app
"""

import logging

from fastapi import FastAPI

from config.standards_settings import LOG_LEVEL
from src.api.standards_api import router as standards_router


def create_app() -> FastAPI:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(title="Standards Resolution Service")
    app.include_router(standards_router)
    return app


app = create_app()
