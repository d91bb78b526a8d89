"""Fake HTTP client.

``HttpClient`` simulates requests coming in from the internet: new
user registrations, verification requests and, optionally, password
changes and removals.  It is built with the request handlers it should
exercise and runs a fixed script against them, checking every answer.

A registration handler that persists a user must call
:meth:`HttpClient.set_ready_for_verification` with the user's name;
the script checks for that right after each registration.

The script stops at the first step whose outcome differs from the
expected one and reports that step's message.  Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Set

from ..schemas.user import (
    ChangePasswordRequest,
    NewUserRequest,
    RemoveUserRequest,
    RequestResult,
    VerificationRequest,
)


logger = logging.getLogger(__name__)

NewUserHandler = Callable[[NewUserRequest, "HttpClient"], RequestResult]
VerificationHandler = Callable[[VerificationRequest, "HttpClient"], RequestResult]
ChangePasswordHandler = Callable[[ChangePasswordRequest, "HttpClient"], RequestResult]
RemoveUserHandler = Callable[[RemoveUserRequest, "HttpClient"], RequestResult]

# A step returns ``None`` when it passes and an error message otherwise.
Step = Callable[[], Optional[str]]


class HttpClient:
    """Drives scripted requests into the given handlers."""

    def __init__(
        self,
        new_user_request: NewUserHandler,
        verification_request: VerificationHandler,
        change_password_request: Optional[ChangePasswordHandler] = None,
        remove_user_request: Optional[RemoveUserHandler] = None,
    ) -> None:
        self._new_user_request = new_user_request
        self._verification_request = verification_request
        self._change_password_request = change_password_request
        self._remove_user_request = remove_user_request
        self._ready_for_verification: Set[str] = set()

    # --- scripts ---

    def run(self) -> Optional[str]:
        """Run the registration and verification script.

        Returns ``None`` when every step passed, otherwise the message of
        the first failed step.
        """
        return self._run_steps(
            [
                lambda: self.successful_new_user_registration("user1", "password1"),
                lambda: self.check_if_ready_for_verification("user1"),
                lambda: self.successful_new_user_registration("user2", "password2"),
                lambda: self.check_if_ready_for_verification("user2"),
                # the user already exists
                lambda: self.failed_new_user_registration("user1", "password1"),
                lambda: self.successful_verification("user1"),
                # no such user
                lambda: self.failed_verification("user3"),
                lambda: self.check_if_not_ready_for_verification("user3"),
                # no need for verifying twice
                lambda: self.failed_verification("user1"),
            ]
        )

    def run_account_maintenance(self) -> Optional[str]:
        """Run the password change and removal script.

        Expects the state left behind by :meth:`run`: ``user1`` verified,
        ``user2`` registered but unverified, ``user3`` unknown.
        """
        if self._change_password_request is None or self._remove_user_request is None:
            raise ValueError(
                "Account maintenance needs both a change-password and a remove-user handler"
            )
        return self._run_steps(
            [
                lambda: self.failed_password_change("user1", "not-the-password", "password1b"),
                lambda: self.successful_password_change("user1", "password1", "password1b"),
                # not verified yet
                lambda: self.failed_password_change("user2", "password2", "password2b"),
                lambda: self.failed_removal("user2"),
                lambda: self.failed_removal("user3"),
                lambda: self.successful_removal("user1"),
                # already gone
                lambda: self.failed_removal("user1"),
            ]
        )

    def _run_steps(self, steps: Iterable[Step]) -> Optional[str]:
        for index, step in enumerate(steps, start=1):
            error = step()
            if error is not None:
                logger.warning("Script step %d failed: %s", index, error)
                return error
        return None

    # --- notification sink ---

    def set_ready_for_verification(self, name: str) -> None:
        """Record that ``name`` was persisted and now awaits verification.

        Simulates the answer sent to a new user asking them to confirm
        that they really requested the registration.
        """
        self._ready_for_verification.add(name)

    def is_ready_for_verification(self, name: str) -> bool:
        return name in self._ready_for_verification

    @property
    def ready_for_verification(self) -> List[str]:
        return sorted(self._ready_for_verification)

    # --- steps ---

    def check_if_ready_for_verification(self, name: str) -> Optional[str]:
        if name in self._ready_for_verification:
            return None
        return f"The user {name} should be ready for verification at this point in the script"

    def check_if_not_ready_for_verification(self, name: str) -> Optional[str]:
        if name not in self._ready_for_verification:
            return None
        return f"The user {name} should NOT be ready for verification at this point in the script"

    def successful_new_user_registration(self, name: str, password: str) -> Optional[str]:
        result = self._new_user_request(NewUserRequest(name=name, password=password), self)
        return None if result.success else result.message

    def failed_new_user_registration(self, name: str, password: str) -> Optional[str]:
        result = self._new_user_request(NewUserRequest(name=name, password=password), self)
        return f"User registration of {name} should have failed" if result.success else None

    def successful_verification(self, name: str) -> Optional[str]:
        result = self._verification_request(VerificationRequest(name=name), self)
        return None if result.success else f"The verification of {name} should have been successful"

    def failed_verification(self, name: str) -> Optional[str]:
        result = self._verification_request(VerificationRequest(name=name), self)
        return f"The verification of {name} should have failed" if result.success else None

    def successful_password_change(self, name: str, old_password: str, new_password: str) -> Optional[str]:
        result = self._change_password(name, old_password, new_password)
        if result.success:
            return None
        return f"The password change of {name} should have been successful: {result.message}"

    def failed_password_change(self, name: str, old_password: str, new_password: str) -> Optional[str]:
        result = self._change_password(name, old_password, new_password)
        return f"The password change of {name} should have failed" if result.success else None

    def successful_removal(self, name: str) -> Optional[str]:
        result = self._remove_user(name)
        if result.success:
            return None
        return f"The removal of {name} should have been successful: {result.message}"

    def failed_removal(self, name: str) -> Optional[str]:
        result = self._remove_user(name)
        return f"The removal of {name} should have failed" if result.success else None

    def _change_password(self, name: str, old_password: str, new_password: str) -> RequestResult:
        if self._change_password_request is None:
            raise ValueError("No change-password handler configured")
        request = ChangePasswordRequest(name=name, old_password=old_password, new_password=new_password)
        return self._change_password_request(request, self)

    def _remove_user(self, name: str) -> RequestResult:
        if self._remove_user_request is None:
            raise ValueError("No remove-user handler configured")
        return self._remove_user_request(RemoveUserRequest(name=name), self)
