"""FastAPI application entrypoint."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wealth_engine import __version__
from wealth_engine.api.routes import api_router
from wealth_engine.config import get_settings
from wealth_engine.core.logging import setup_logging

logger = logging.getLogger("wealth_engine")

settings = get_settings()
setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name, version=__version__)

# The dashboard is served locally during development.
allowed_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost",
    "http://127.0.0.1",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Return service readiness metadata."""

    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "timezone": settings.timezone,
    }


def configure_app() -> FastAPI:
    """Attach routes."""

    app.include_router(api_router)
    logger.info("Analytics service configuration: %s", settings.dict_for_logging())
    return app


configure_app()

__all__ = ["app", "configure_app"]
