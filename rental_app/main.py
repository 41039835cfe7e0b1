from __future__ import annotations

from fastapi import FastAPI

from rental_app.api.router import api_router
from rental_app.core.config import get_settings
from rental_app.core.logging_config import configure_logging


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)
    app.include_router(api_router, prefix=settings.api_prefix)
    return app


app = create_app()
