"""
Request handlers for users.

Each handler takes a request, the ``Database`` and a notification sink
and answers with a ``RequestResult``.  Handlers hold no state of their
own: every mutation goes through a single ``Database`` call, and a
business-rule violation is reported as a failed result rather than an
exception.  ``bind_database`` fixes the database argument so the fake
HTTP client can call ``handler(request, client)``.
"""

import functools
import logging
from typing import Any, Callable

from ..core.db import Database
from ..schemas.user import (
    ChangePasswordRequest,
    FailureReason,
    NewUserRequest,
    RemoveUserRequest,
    RequestResult,
    User,
    VerificationRequest,
)
from .notification_service import VerificationNotifier


logger = logging.getLogger(__name__)


def on_new_user(request: NewUserRequest, db: Database, notifier: VerificationNotifier) -> RequestResult:
    """Register a new, unverified user.

    1. A user that already exists (by name) cannot be registered again.
    2. After the user is persisted, ``notifier`` is told the user is
       ready for verification.
    """
    existing = db.get(request.name)
    if existing is not None:
        logger.info("Rejected registration of %s: name taken", request.name)
        return RequestResult.fail(
            f"User {existing.name} already in the database", FailureReason.ALREADY_EXISTS
        )
    if not db.add(User(name=request.name, password=request.password)):
        logger.warning("User %s could not be persisted", request.name)
        return RequestResult.fail(
            f"User {request.name} cannot be persisted", FailureReason.STORAGE_ERROR
        )
    notifier.set_ready_for_verification(request.name)
    logger.info("Registered user %s", request.name)
    return RequestResult.ok()


def on_verification(request: VerificationRequest, db: Database, notifier: VerificationNotifier) -> RequestResult:
    """Mark a registered user as verified.

    Unknown users and users who are already verified cannot be verified.
    """
    user = db.get(request.name)
    if user is None:
        logger.info("Rejected verification of unknown user %s", request.name)
        return RequestResult.fail(f"User {request.name} does not exist", FailureReason.NOT_FOUND)
    if user.verified:
        logger.info("Rejected verification of %s: already verified", request.name)
        return RequestResult.fail(
            f"User {request.name} is already verified", FailureReason.ALREADY_VERIFIED
        )
    if not db.verify(request.name):
        return RequestResult.fail(
            f"User {request.name} cannot be verified", FailureReason.STORAGE_ERROR
        )
    logger.info("Verified user %s", request.name)
    return RequestResult.ok()


def on_change_password(
    request: ChangePasswordRequest, db: Database, notifier: VerificationNotifier
) -> RequestResult:
    """Replace the password of a verified user whose old password matches."""
    user = db.get(request.name)
    if user is None:
        return RequestResult.fail(f"User {request.name} does not exist", FailureReason.NOT_FOUND)
    if not user.verified:
        return RequestResult.fail(f"User {request.name} is not verified", FailureReason.NOT_VERIFIED)
    if user.password != request.old_password:
        logger.info("Rejected password change for %s: wrong password", request.name)
        return RequestResult.fail(
            f"Wrong password for user {request.name}", FailureReason.WRONG_PASSWORD
        )
    if not db.change_password(request.name, request.old_password, request.new_password):
        return RequestResult.fail(
            f"Password of user {request.name} cannot be changed", FailureReason.STORAGE_ERROR
        )
    logger.info("Changed password of user %s", request.name)
    return RequestResult.ok()


def on_remove_user(request: RemoveUserRequest, db: Database, notifier: VerificationNotifier) -> RequestResult:
    """Delete a verified user.  Unverified users must verify first."""
    user = db.get(request.name)
    if user is None:
        return RequestResult.fail(f"User {request.name} does not exist", FailureReason.NOT_FOUND)
    if not user.verified:
        return RequestResult.fail(f"User {request.name} is not verified", FailureReason.NOT_VERIFIED)
    if not db.remove(request.name):
        return RequestResult.fail(
            f"User {request.name} cannot be removed", FailureReason.STORAGE_ERROR
        )
    logger.info("Removed user %s", request.name)
    return RequestResult.ok()


def bind_database(handler: Callable[[Any, Database, VerificationNotifier], RequestResult], db: Database):
    """Return ``handler`` with ``db`` fixed, callable as ``(request, notifier)``.

    ``functools.partial`` cannot fix the middle argument while the client
    passes the notifier positionally.
    """

    @functools.wraps(handler)
    def bound(request, notifier: VerificationNotifier) -> RequestResult:
        return handler(request, db, notifier)

    return bound
