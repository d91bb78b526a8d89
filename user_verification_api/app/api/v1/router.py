"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a unified prefix: ``/users`` for
the account requests and ``/verifications`` for the outbox of pending
verification notices.  New domains get their own module in
``endpoints`` and are included here.
"""

from fastapi import APIRouter

from .endpoints import users, verifications

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(verifications.router, prefix="/verifications", tags=["verifications"])
