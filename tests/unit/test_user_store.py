"""
Unit tests for UserStore (registration, hashing on write, lookups).
"""
from datetime import timedelta
from unittest.mock import MagicMock

import pytest
from contact_chat.application.services.user_store import UserStore
from contact_chat.core.security import verify_password
from contact_chat.domain.exceptions import (
    DatabaseError,
    DuplicateEmail,
    HashingFailure,
    ValidationError,
)


class TestCreate:
    """Tests for UserStore.create"""

    @pytest.mark.asyncio
    async def test_password_is_hashed(self, register, user_store):
        await register(email="alice@example.com", password="secret123")

        stored = await user_store.find_by_email("alice@example.com")
        assert stored is not None
        assert stored.password != "secret123"
        assert user_store.verify_password(stored, "secret123") is True
        assert user_store.verify_password(stored, "secret124") is False

    @pytest.mark.asyncio
    async def test_returns_user_with_id_and_bio(self, register):
        user = await register(bio="Likes hiking")
        assert user.id
        assert user.bio == "Likes hiking"
        assert user.contacts == []
        assert user.session_secret is None

    @pytest.mark.asyncio
    async def test_email_normalized(self, register, user_store):
        user = await register(email="Alice@Example.COM")
        assert user.email == "alice@example.com"
        assert await user_store.find_by_email("ALICE@example.com") is not None

    @pytest.mark.asyncio
    async def test_duplicate_email_case_insensitive(self, register):
        await register(email="alice@example.com")
        with pytest.raises(DuplicateEmail):
            await register(name="Alicia", email="ALICE@EXAMPLE.COM")

    @pytest.mark.asyncio
    async def test_validation_error_names_field(self, register, user_repository):
        with pytest.raises(ValidationError) as exc_info:
            await register(surname="X1")
        assert exc_info.value.field == "surname"
        assert user_repository.users == {}

    @pytest.mark.asyncio
    async def test_hashing_failure_persists_nothing(self, user_repository, clock):
        def failing_hasher(_plain):
            raise HashingFailure("out of memory")

        store = UserStore(user_repository, clock=clock, password_hasher=failing_hasher)
        with pytest.raises(HashingFailure):
            await store.create("Alice", "Smith", "alice@example.com", "secret123")
        assert user_repository.users == {}

    @pytest.mark.asyncio
    async def test_timestamps_set(self, register, clock):
        user = await register()
        assert user.created_at == clock.now
        assert user.updated_at == clock.now


class TestSave:
    """Tests for UserStore.save"""

    @pytest.mark.asyncio
    async def test_unrelated_update_does_not_rehash(self, register, user_store, clock):
        user = await register(password="secret123")
        original_hash = user.password

        clock.advance(timedelta(minutes=1))
        user.bio = "Updated bio"
        saved = await user_store.save(user)

        assert saved.password == original_hash
        assert saved.bio == "Updated bio"
        assert saved.updated_at == clock.now
        assert saved.created_at != clock.now
        assert user_store.verify_password(saved, "secret123") is True

    @pytest.mark.asyncio
    async def test_change_password_rehashes(self, register, user_store):
        user = await register(password="secret123")

        saved = await user_store.change_password(user, "new-secret")

        assert saved.password != "new-secret"
        assert verify_password("new-secret", saved.password) is True
        assert verify_password("secret123", saved.password) is False
        assert user.password_modified is False

    @pytest.mark.asyncio
    async def test_invalid_mutation_rejected(self, register, user_store):
        user = await register()
        user.name = "A"
        with pytest.raises(ValidationError):
            await user_store.save(user)


class TestLookups:
    """Tests for find_* helpers and verify_password edge cases"""

    @pytest.mark.asyncio
    async def test_find_by_session_secret_empty_is_none(self, user_store, user_repository):
        user_repository.fail_with = DatabaseError("should not be called")
        assert await user_store.find_by_session_secret("") is None
        assert await user_store.find_by_session_secret(None) is None

    @pytest.mark.asyncio
    async def test_find_by_id(self, register, user_store):
        user = await register()
        found = await user_store.find_by_id(user.id)
        assert found.email == user.email

    def test_verify_password_empty_claim(self, user_store):
        user = MagicMock(password="$2b$04$hash")
        assert user_store.verify_password(user, "") is False
