"""Shared fixtures: an in-memory SQLite store swapped in for the real one."""

import os

# settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from caseorder import models
from caseorder.database import Base, build_engine, get_db
from caseorder.main import app
from caseorder.store import Repository


@pytest.fixture
def engine():
    eng = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def session(session_factory):
    sess = session_factory()
    yield sess
    sess.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        sess = session_factory()
        try:
            yield sess
        finally:
            sess.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def order_refs(session):
    """Artwork, font and font color rows an order can point at."""
    artwork = Repository(session, models.Artwork).create(
        {"title": "Starry Night", "artist": "Gogh", "image_path": "/art/starry.png"}
    )
    font = Repository(session, models.Font).create(
        {"font_name": "Nanum Gothic", "hexcode_id": 1, "font_file_path": "/fonts/nanum.ttf"}
    )
    fontcolor = Repository(session, models.FontColor).create({"fontcolor_name": "White", "hexcode_id": 2})
    return {
        "artwork_id": artwork.artwork_id,
        "font_id": font.font_id,
        "fontcolor_id": fontcolor.fontcolor_id,
    }


class FailingSession:
    """Session stand-in whose every round trip fails like a dropped connection."""

    def __init__(self):
        self.rollbacks = 0

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("server closed the connection"))

    execute = get = add = commit = refresh = _fail

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass


@pytest.fixture
def failing_session():
    return FailingSession()
