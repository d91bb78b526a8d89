"""
Pydantic models for user data and request outcomes.

Defines the stored ``User`` record, the four request payloads the fake
HTTP client sends (registration, verification, password change and
removal) and the two-case ``RequestResult`` returned by every handler.
Handlers never raise for business-rule violations; they answer with a
failed ``RequestResult`` carrying a human readable message and a
machine readable ``FailureReason``.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """A user record as kept by the in-memory database."""

    name: str = Field(..., examples=["user1"])
    password: str = Field(..., examples=["password1"])
    verified: bool = Field(False, examples=[False])


class UserRead(BaseModel):
    """Schema for reading a user from the API.  Never exposes the password."""

    name: str
    verified: bool = False


class NewUserRequest(BaseModel):
    """A request for a new user registration."""

    name: str = Field(..., examples=["user1"])
    password: str = Field(..., examples=["password1"])


class UserCreate(NewUserRequest):
    """Body of ``POST /users/``.  The API refuses empty names."""

    name: str = Field(..., min_length=1, examples=["user1"])


class VerificationRequest(BaseModel):
    """A verification request for an existing, not yet verified user."""

    name: str


class PasswordChange(BaseModel):
    """Body of ``PUT /users/{name}/password``."""

    old_password: str
    new_password: str


class ChangePasswordRequest(PasswordChange):
    """A password change request for a verified user."""

    name: str


class RemoveUserRequest(BaseModel):
    """A request to delete a verified user."""

    name: str


class FailureReason(str, Enum):
    """Why a request failed; the API maps each reason to a status code."""

    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    ALREADY_VERIFIED = "already_verified"
    NOT_VERIFIED = "not_verified"
    WRONG_PASSWORD = "wrong_password"
    STORAGE_ERROR = "storage_error"


class RequestResult(BaseModel):
    """Outcome of a handler call: either success or failure with a reason.

    Use :meth:`ok` and :meth:`fail` instead of constructing the model
    directly so that a successful result never carries a message.
    """

    success: bool
    message: Optional[str] = None
    reason: Optional[FailureReason] = None

    @classmethod
    def ok(cls) -> "RequestResult":
        return cls(success=True)

    @classmethod
    def fail(cls, message: str, reason: FailureReason) -> "RequestResult":
        return cls(success=False, message=message, reason=reason)

    def __bool__(self) -> bool:
        return self.success
