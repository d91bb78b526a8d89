import pytest
from fastapi.testclient import TestClient

from user_verification_api.app.core.db import Database
from user_verification_api.app.main import create_app
from user_verification_api.app.schemas.user import User
from user_verification_api.app.services.notification_service import VerificationOutbox


@pytest.fixture
def db():
    return Database()


@pytest.fixture
def outbox():
    return VerificationOutbox()


@pytest.fixture
def seeded_db(db):
    """``alice`` verified, ``bob`` registered but not verified."""
    db.add(User(name="alice", password="wonderland"))
    db.verify("alice")
    db.add(User(name="bob", password="builder"))
    return db


@pytest.fixture
def api():
    with TestClient(create_app()) as client:
        yield client
