"""
In-memory user database.

The ``Database`` class is the only place where user records are
mutated.  Every operation is keyed by the user's name and touches at
most one record, so each call either fully applies or leaves the store
untouched.  Operations report success as a boolean instead of raising;
the request handlers in ``services.user_service`` decide what a failed
operation means for the caller.

The store is owned by a single script run (or a single application
instance) and is not thread-safe.
"""

import logging
from typing import Dict, List, Optional

from ..schemas.user import User


logger = logging.getLogger(__name__)


class Database:
    """Mapping from user name to ``User`` with single-key operations."""

    def __init__(self) -> None:
        self._users: Dict[str, User] = {}

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, name: object) -> bool:
        return name in self._users

    def get(self, name: str) -> Optional[User]:
        """Return a copy of the user called ``name`` or ``None``.

        A copy is returned so callers cannot change stored records
        behind the database's back.
        """
        user = self._users.get(name)
        return user.model_copy() if user is not None else None

    def list_users(self) -> List[User]:
        """Return copies of all users in insertion order."""
        return [user.model_copy() for user in self._users.values()]

    def add(self, user: User) -> bool:
        """Persist a new user.  Fails if the name is already taken."""
        if user.name in self._users:
            return False
        self._users[user.name] = user.model_copy()
        logger.debug("Stored user %s", user.name)
        return True

    def verify(self, name: str) -> bool:
        """Set the ``verified`` flag.  Fails if absent or already verified."""
        user = self._users.get(name)
        if user is None or user.verified:
            return False
        self._users[name] = user.model_copy(update={"verified": True})
        logger.debug("Marked user %s as verified", name)
        return True

    def change_password(self, name: str, old_password: str, new_password: str) -> bool:
        """Replace the password of a verified user whose old password matches."""
        user = self._users.get(name)
        if user is None or not user.verified or user.password != old_password:
            return False
        self._users[name] = user.model_copy(update={"password": new_password})
        logger.debug("Changed password of user %s", name)
        return True

    def remove(self, name: str) -> bool:
        """Delete a verified user.  Unverified users cannot be removed."""
        user = self._users.get(name)
        if user is None or not user.verified:
            return False
        del self._users[name]
        logger.debug("Removed user %s", name)
        return True
