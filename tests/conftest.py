"""
Shared pytest fixtures for contact chat tests.
"""
import os
from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from contact_chat.core.config import reset_settings
from contact_chat.application.services.user_store import UserStore
from contact_chat.application.services.session_manager import SessionManager
from contact_chat.application.services.contact_manager import ContactManager
from tests.fakes import SESSION_TIME, FakeClock, InMemoryUserRepository


@pytest.fixture(autouse=True)
def test_env():
    """Cheap bcrypt rounds and a local database name for every test."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_contact_chat",
        "BCRYPT_SALT_WORK_FACTOR": "4",
        "STRING_ID_LENGTH": "32",
        "VALID_SESSION_TIME_SECONDS": str(int(SESSION_TIME.total_seconds())),
    }
    reset_settings()
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars
    reset_settings()


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def user_store(user_repository, clock):
    return UserStore(user_repository=user_repository, clock=clock)


@pytest.fixture
def session_manager(user_store, clock):
    return SessionManager(
        user_store=user_store,
        valid_session_time=SESSION_TIME,
        string_id_length=32,
        clock=clock,
    )


@pytest.fixture
def contact_manager(session_manager, user_store):
    return ContactManager(session_manager=session_manager, user_store=user_store)


@pytest.fixture
def register(user_store):
    """Register a user with sensible defaults."""
    async def _register(name="Alice", surname="Smith", email="alice@example.com",
                        password="secret123", bio=None):
        return await user_store.create(
            name=name, surname=surname, email=email, password=password, bio=bio
        )
    return _register
