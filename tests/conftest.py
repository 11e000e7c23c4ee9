"""Shared fixtures.

The environment is pointed at a throwaway SQLite file and log directory
before any application module is imported, so the suite never touches a
developer database or a real OpenAI key.
"""
import os
import tempfile
import uuid

_tmp_dir = tempfile.mkdtemp(prefix="fitness-tests-")
os.environ["WRITE_DATABASE_URL"] = "sqlite:///" + os.path.join(_tmp_dir, "test.db")
os.environ.pop("READ_DATABASE_URL", None)
os.environ["LOG_DIR"] = _tmp_dir
os.environ["OPENAI_API_KEY"] = ""

import json
from types import SimpleNamespace

import pytest

from database import init_db, models
from database.database import WriteSessionLocal
from api.auth import register
from schemas import UserCreateRequest


@pytest.fixture(scope="session", autouse=True)
def setup_db():
    """Create tables and seed catalogues once per test run."""
    init_db(seed=True)


@pytest.fixture
def db():
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


def make_user(db, **profile):
    """Register a user with a unique name and return the ORM row."""
    payload = UserCreateRequest(username=f"user-{uuid.uuid4().hex[:10]}", password="secret", **profile)
    created = register(payload=payload, db=db)
    return db.get(models.User, created.user.id)


@pytest.fixture
def user(db):
    """A user with a complete body profile."""
    return make_user(
        db,
        age=30,
        weight=70.0,
        height=175.0,
        gender="male",
        activity_level="moderate",
        fitness_goal="body_recomposition",
        target_weight=68.0,
    )


class FakeCompletions:
    """Stand-in for `client.chat.completions` that replays a canned answer.

    `empty=True` answers with no choices at all.
    """

    def __init__(self, content=None, error=None, empty=False):
        self.content = content
        self.error = error
        self.empty = empty
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        if self.empty:
            return SimpleNamespace(choices=[])
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    def __init__(self, content=None, error=None, empty=False):
        if content is not None and not isinstance(content, str):
            content = json.dumps(content)
        self.chat = SimpleNamespace(completions=FakeCompletions(content, error, empty))
