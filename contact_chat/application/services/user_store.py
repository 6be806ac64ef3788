# Standard library imports
import logging
from datetime import datetime
from typing import Callable, List, Optional

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.models.contact import ContactSummary
from ...domain.exceptions import DuplicateEmail
from ...core.security import hash_password, verify_password
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)


class UserStore:
    """
    User persistence rules layered on a UserRepository.

    Owns email normalization and uniqueness, field validation, and hashing of
    plaintext passwords before they reach the repository.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        clock: Callable[[], datetime] = utc_now,
        password_hasher: Callable[[str], str] = hash_password,
    ) -> None:
        self.user_repository = user_repository
        self.clock = clock
        self.password_hasher = password_hasher

    async def create(
        self,
        name: str,
        surname: str,
        email: str,
        password: str,
        bio: Optional[str] = None,
    ) -> User:
        """
        Register a new user

        Raises:
            ValidationError: If a field has an invalid shape
            DuplicateEmail: If the email is already registered
            HashingFailure: If the password could not be hashed
            DatabaseError: If the store fails
        """
        user = User(
            id=None,
            name=name,
            surname=surname,
            email=email,
            password=password,
            bio=bio,
            password_modified=True,
        )

        existing_user = await self.user_repository.find_by_email(user.email)
        if existing_user is not None:
            raise DuplicateEmail(user.email)

        saved_user = await self.save(user)
        logger.info(f"Registered user {saved_user.id}")
        return saved_user

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self.user_repository.find_by_email(normalize_email(email))

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self.user_repository.find_by_id(user_id)

    async def find_by_session_secret(self, session_secret: str) -> Optional[User]:
        if not session_secret:
            return None
        return await self.user_repository.find_by_session_secret(session_secret)

    async def save(self, user: User) -> User:
        """
        Validate and persist a user

        The password is hashed only when it was set from plaintext since the
        user was loaded; an already-hashed password is written untouched.
        """
        user.validate()

        if user.password_modified:
            user.password = self.password_hasher(user.password)
            user.password_modified = False

        now = self.clock()
        if user.created_at is None:
            user.created_at = now
        user.updated_at = now

        return await self.user_repository.save(user)

    async def change_password(self, user: User, new_password: str) -> User:
        user.set_password(new_password)
        return await self.save(user)

    def verify_password(self, user: User, claimed_password: str) -> bool:
        """Check a plaintext password claim against the user's stored hash"""
        if not claimed_password or not user.password:
            return False
        return verify_password(claimed_password, user.password)

    async def start_session(self, user: User, session_secret: str, now: datetime) -> bool:
        return await self.user_repository.start_session(user.id, session_secret, now)

    async def touch_session(self, session_secret: str, now: datetime, active_since: datetime) -> bool:
        if not session_secret:
            return False
        return await self.user_repository.touch_session(session_secret, now, active_since)

    async def clear_session(self, session_secret: str, now: datetime) -> bool:
        if not session_secret:
            return False
        return await self.user_repository.clear_session(session_secret, now)

    async def add_contact(self, user: User, contact: User) -> bool:
        """Append contact to user's contact list (duplicates allowed)"""
        added = await self.user_repository.push_contact(user.id, contact.id)
        if added:
            user.contacts.append(contact.id)
        return added

    async def get_contacts(self, user: User) -> List[ContactSummary]:
        return await self.user_repository.find_contact_summaries(user.contacts)
