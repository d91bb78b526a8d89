"""
Top‑level package for the User Verification API.

All functionality lives in submodules under ``app``: the in-memory
database in ``app.core.db``, the request handlers in
``app.services.user_service``, the scripted fake HTTP client in
``app.client.http_client`` and the FastAPI application in ``app.main``.
"""

__all__ = []
