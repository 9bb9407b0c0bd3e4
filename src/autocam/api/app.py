"""FastAPI application factory."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from autocam.api.middleware import autocam_error_handler
from autocam.api.routes import analyze, process, status
from autocam.config import get_settings
from autocam.models.errors import AutocamError


def create_app() -> FastAPI:
    """Build the Auto Camera API with its error handler and routers."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Auto Camera",
        description="Automatic multicam editing driven by camera audio levels",
        version="0.1.0",
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers
    app.add_exception_handler(AutocamError, autocam_error_handler)

    # Routes
    app.include_router(analyze.router)
    app.include_router(process.router)
    app.include_router(status.router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": "0.1.0"}

    return app


app = create_app()
