"""
"Ready for verification" notifications.

After a user is persisted, the registration handler tells a sink that
the user now awaits verification.  During a scripted run the fake HTTP
client is the sink; the API keeps a ``VerificationOutbox`` on the
application state instead.
"""

import logging
from typing import List, Protocol


logger = logging.getLogger(__name__)


class VerificationNotifier(Protocol):
    """Anything that can be told a user awaits verification."""

    def set_ready_for_verification(self, name: str) -> None:
        ...


class VerificationOutbox:
    """Collects the names of users a verification request was sent to."""

    def __init__(self) -> None:
        self._pending: List[str] = []

    def set_ready_for_verification(self, name: str) -> None:
        if name not in self._pending:
            self._pending.append(name)
        logger.info("Verification request queued for %s", name)

    def is_ready_for_verification(self, name: str) -> bool:
        return name in self._pending

    def pending(self) -> List[str]:
        return list(self._pending)
