"""Root conftest: shared test configuration."""

import os

# Settings require these at import time; never point tests at a real project
os.environ.setdefault("SUPABASE_URL", "https://fake.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

from datetime import datetime, timezone

import pytest

from app.database.supabase_client import BackendClient
from tests.fake_supabase import ALICE, BOB, FakeSupabase

NOW = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def db():
    fake = FakeSupabase()
    fake.add_user("token-alice", ALICE, "alice@example.com")
    fake.add_user("token-bob", BOB, "bob@example.com")
    return fake


@pytest.fixture
def alice(db):
    return BackendClient(db, access_token="token-alice")


@pytest.fixture
def bob(db):
    return BackendClient(db, access_token="token-bob")


@pytest.fixture
def anonymous(db):
    return BackendClient(db)


@pytest.fixture
def clock():
    return lambda: NOW
