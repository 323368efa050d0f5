"""
Shared fixtures: a throwaway SQLite database, seeded teams and API clients.
"""

import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="festival-scores-tests-")

# Settings are read at import time, so they must be in place first.
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ["DATA_DIR"] = _TMP_DIR
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR}/test.db"
os.environ["ADMIN_USER"] = "admin"
os.environ["ADMIN_PASS"] = "changeme"
os.environ["API_PREFIX"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel  # noqa: E402

from festival_scores.app import app  # noqa: E402
from festival_scores.core import engine  # noqa: E402
from festival_scores.models import ScoreInput, TeamInput  # noqa: E402
from festival_scores.services.scores import create_score  # noqa: E402
from festival_scores.services.teams import create_team  # noqa: E402

ADMIN_AUTH = ("admin", "changeme")


@pytest.fixture
def session():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as db:
        yield db
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def teams(session):
    """Three teams keyed by letter, mapped to their ids."""
    created = {}
    for name in ("A", "B", "C"):
        created[name] = create_team(session, TeamInput(name=f"Team {name}")).id
    return created


@pytest.fixture
def make_score(session):
    """Create a score from keyword arguments using the API field names."""

    def _make(**fields):
        fields.setdefault("eventId", 1)
        return create_score(session, ScoreInput(**fields))

    return _make


@pytest.fixture
def client(session):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post(
        "/auth/login", json={"username": ADMIN_AUTH[0], "password": ADMIN_AUTH[1]}
    )
    assert response.status_code == 200
    return client
