"""Scripted entry point.

Creates a fresh in-memory database and a fake HTTP client wired with
the user request handlers, runs the registration and verification
script and prints the verdict: ``Success!`` when every step passed,
``Error: <message>`` for the first step that did not.

Usage:
    python run.py

Set ``LOG_LEVEL=INFO`` to follow the handler decisions on stderr.
"""
import sys
from typing import Optional

from user_verification_api.app.client.http_client import HttpClient
from user_verification_api.app.core.config import settings
from user_verification_api.app.core.db import Database
from user_verification_api.app.core.logging_config import setup_logging
from user_verification_api.app.services.user_service import (
    bind_database,
    on_change_password,
    on_new_user,
    on_remove_user,
    on_verification,
)


def build_client(db: Database) -> HttpClient:
    """Bind ``db`` into every handler and hand them to a new client."""
    return HttpClient(
        bind_database(on_new_user, db),
        bind_database(on_verification, db),
        bind_database(on_change_password, db),
        bind_database(on_remove_user, db),
    )


def run_script() -> Optional[str]:
    """Run the script against a fresh database and return its error, if any."""
    return build_client(Database()).run()


def main() -> int:
    setup_logging(settings.log_level, settings.log_file)
    error = run_script()
    if error is None:
        print("Success!")
        return 0
    print(f"Error: {error}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
