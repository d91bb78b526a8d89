"""
Main entrypoint for the User Verification API.

This module assembles the FastAPI application: it sets up logging,
attaches a fresh in-memory ``Database`` and ``VerificationOutbox`` to
the application state and includes the versioned routers.  The app is
instantiated at import time as ``app`` so any ASGI server can serve
``user_verification_api.app.main:app``.

Each call to ``create_app`` starts from an empty database, which keeps
tests independent of each other.
"""

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import Database
from .core.logging_config import setup_logging
from .services.notification_service import VerificationOutbox


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        An application with its own empty user database, ready to be
        served or wrapped in ``fastapi.testclient.TestClient``.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.db = Database()
    app.state.outbox = VerificationOutbox()

    app.include_router(v1_router, prefix="/api/v1")
    return app


app = create_app()
