"""
End-to-end scenarios through the use cases, backed by the in-memory repository
and a controllable clock.
"""
from datetime import timedelta

import pytest
from contact_chat.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest
from contact_chat.application.dto.contact_dto import AddContactRequest
from contact_chat.application.use_cases import (
    AddContactUseCase,
    CheckSessionUseCase,
    ListContactsUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshSessionUseCase,
    RegisterUserUseCase,
)
from contact_chat.domain.exceptions import DuplicateEmail, InvalidCredentials
from tests.fakes import SESSION_TIME

pytestmark = pytest.mark.integration


@pytest.fixture
def use_cases(user_store, session_manager, contact_manager):
    class UseCases:
        register = RegisterUserUseCase(user_store)
        login = LoginUserUseCase(user_store, session_manager)
        logout = LogoutUserUseCase(session_manager)
        refresh = RefreshSessionUseCase(session_manager)
        is_authenticated = CheckSessionUseCase(session_manager)
        add_contact = AddContactUseCase(contact_manager)
        list_contacts = ListContactsUseCase(contact_manager)
    return UseCases


def _registration(name, surname, email, password="secret123"):
    return UserRegistrationRequest(name=name, surname=surname, email=email, password=password)


@pytest.mark.asyncio
async def test_alice_session_expires(use_cases, user_store, clock):
    alice = await use_cases.register.execute(_registration("Alice", "Smith", "alice@x.com"))
    assert alice.email == "alice@x.com"

    stored = await user_store.find_by_email("alice@x.com")
    assert stored.password != "secret123"
    assert user_store.verify_password(stored, "secret123")

    session = await use_cases.login.execute(
        UserLoginRequest(email="alice@x.com", password="secret123")
    )
    assert await use_cases.is_authenticated.execute(session.session_secret) is True

    clock.advance(SESSION_TIME + timedelta(seconds=1))
    assert await use_cases.is_authenticated.execute(session.session_secret) is False


@pytest.mark.asyncio
async def test_alice_adds_bob(use_cases):
    await use_cases.register.execute(_registration("Alice", "Smith", "alice@x.com"))
    await use_cases.register.execute(_registration("Bob", "Brown", "bob@x.com"))
    session = await use_cases.login.execute(
        UserLoginRequest(email="alice@x.com", password="secret123")
    )

    added = await use_cases.add_contact.execute(
        session.session_secret, AddContactRequest(email="bob@x.com")
    )
    assert added.result is True

    contacts = await use_cases.list_contacts.execute(session.session_secret)
    assert contacts.result is True
    assert [c.model_dump() for c in contacts.contact_list] == [{"name": "Bob", "surname": "Brown"}]


@pytest.mark.asyncio
async def test_heartbeat_keeps_session_alive_and_logout_ends_it(use_cases, clock):
    await use_cases.register.execute(_registration("Alice", "Smith", "alice@x.com"))
    session = await use_cases.login.execute(
        UserLoginRequest(email="alice@x.com", password="secret123")
    )
    secret = session.session_secret

    for _ in range(4):
        clock.advance(SESSION_TIME - timedelta(minutes=1))
        assert await use_cases.refresh.execute(secret) is True
    assert await use_cases.is_authenticated.execute(secret) is True

    assert await use_cases.logout.execute(secret) is True
    assert await use_cases.is_authenticated.execute(secret) is False
    assert await use_cases.refresh.execute(secret) is False
    contacts = await use_cases.list_contacts.execute(secret)
    assert contacts.error == "Invalid session"


@pytest.mark.asyncio
async def test_login_rejections(use_cases):
    await use_cases.register.execute(_registration("Alice", "Smith", "alice@x.com"))

    with pytest.raises(InvalidCredentials):
        await use_cases.login.execute(UserLoginRequest(email="alice@x.com", password="wrong"))
    with pytest.raises(InvalidCredentials):
        await use_cases.login.execute(UserLoginRequest(email="nobody@x.com", password="secret123"))
    with pytest.raises(DuplicateEmail):
        await use_cases.register.execute(_registration("Alicia", "Smith", "ALICE@X.COM"))


@pytest.mark.asyncio
async def test_login_is_case_insensitive_on_email(use_cases):
    await use_cases.register.execute(_registration("Alice", "Smith", "alice@x.com"))
    session = await use_cases.login.execute(
        UserLoginRequest(email="Alice@X.com", password="secret123")
    )
    assert await use_cases.is_authenticated.execute(session.session_secret) is True
