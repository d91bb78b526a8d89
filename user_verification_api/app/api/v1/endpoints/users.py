"""
User endpoints for API v1.

Expose registration, verification, password change and removal over
HTTP.  The endpoints call the same handlers the fake HTTP client
drives, against the ``Database`` and ``VerificationOutbox`` kept on
the application state.  A failed ``RequestResult`` becomes an
``HTTPException`` whose status code depends on the failure reason.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status

from user_verification_api.app.core.db import Database
from user_verification_api.app.schemas.user import (
    ChangePasswordRequest,
    FailureReason,
    PasswordChange,
    RemoveUserRequest,
    RequestResult,
    UserCreate,
    UserRead,
    VerificationRequest,
)
from user_verification_api.app.services.notification_service import VerificationOutbox
from user_verification_api.app.services.user_service import (
    on_change_password,
    on_new_user,
    on_remove_user,
    on_verification,
)


router = APIRouter()

_STATUS_BY_REASON = {
    FailureReason.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    FailureReason.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureReason.ALREADY_VERIFIED: status.HTTP_409_CONFLICT,
    FailureReason.NOT_VERIFIED: status.HTTP_403_FORBIDDEN,
    FailureReason.WRONG_PASSWORD: status.HTTP_403_FORBIDDEN,
    FailureReason.STORAGE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_outbox(request: Request) -> VerificationOutbox:
    return request.app.state.outbox


def _raise_for_failure(result: RequestResult) -> None:
    if not result.success:
        code = _STATUS_BY_REASON.get(result.reason, status.HTTP_400_BAD_REQUEST)
        raise HTTPException(status_code=code, detail=result.message)


def _read_user(db: Database, name: str) -> UserRead:
    user = db.get(name)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User {name} does not exist")
    return UserRead(name=user.name, verified=user.verified)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(
    payload: UserCreate,
    db: Database = Depends(get_db),
    outbox: VerificationOutbox = Depends(get_outbox),
) -> UserRead:
    """Register a new user and queue a verification request for them."""
    _raise_for_failure(on_new_user(payload, db, outbox))
    return _read_user(db, payload.name)


@router.get("/{name}", response_model=UserRead)
def get_user(name: str, db: Database = Depends(get_db)) -> UserRead:
    return _read_user(db, name)


@router.post("/{name}/verify", response_model=UserRead)
def verify_user(
    name: str,
    db: Database = Depends(get_db),
    outbox: VerificationOutbox = Depends(get_outbox),
) -> UserRead:
    """Confirm a registration.  Each user can be verified only once."""
    _raise_for_failure(on_verification(VerificationRequest(name=name), db, outbox))
    return _read_user(db, name)


@router.put("/{name}/password", response_model=UserRead)
def change_password(
    name: str,
    body: PasswordChange,
    db: Database = Depends(get_db),
    outbox: VerificationOutbox = Depends(get_outbox),
) -> UserRead:
    """Change the password of a verified user.

    The old password must match the stored one; a mismatch and an
    unverified account both answer ``403``.
    """
    request = ChangePasswordRequest(
        name=name, old_password=body.old_password, new_password=body.new_password
    )
    _raise_for_failure(on_change_password(request, db, outbox))
    return _read_user(db, name)


@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    name: str,
    db: Database = Depends(get_db),
    outbox: VerificationOutbox = Depends(get_outbox),
) -> None:
    """Delete a verified user."""
    _raise_for_failure(on_remove_user(RemoveUserRequest(name=name), db, outbox))
    return None
