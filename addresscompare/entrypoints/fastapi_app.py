# addresscompare/entrypoints/fastapi_app.py
from __future__ import annotations

from fastapi import FastAPI

from ..config import settings
from .api.errors import register_error_handlers
from .api.routers import compare, health, web


def create_app() -> FastAPI:
    app = FastAPI(title=settings.APP_TITLE)

    register_error_handlers(app)

    # Routers
    app.include_router(health.router)
    app.include_router(compare.router)
    app.include_router(web.router)

    return app
