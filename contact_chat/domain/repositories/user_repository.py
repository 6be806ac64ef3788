from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from ..models.user import User
from ..models.contact import ContactSummary


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find user by (normalized) email address"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def find_by_session_secret(self, session_secret: str) -> Optional[User]:
        """Find the user currently holding a session secret"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save user (create or update).

        Updates never rewrite contacts, session_secret or last_accessed of an
        existing user; those change only through the targeted operations below.
        """
        pass

    @abstractmethod
    async def start_session(self, user_id: str, session_secret: str, now: datetime) -> bool:
        """Set a user's session secret and last_accessed in one write"""
        pass

    @abstractmethod
    async def touch_session(self, session_secret: str, now: datetime, active_since: datetime) -> bool:
        """Set last_accessed = now only if the secret is held and last_accessed >= active_since"""
        pass

    @abstractmethod
    async def clear_session(self, session_secret: str, now: datetime) -> bool:
        """Clear the session secret, filtered on the secret itself"""
        pass

    @abstractmethod
    async def push_contact(self, user_id: str, contact_id: str) -> bool:
        """Atomically append a contact ID to a user's contact list"""
        pass

    @abstractmethod
    async def find_contact_summaries(self, contact_ids: List[str]) -> List[ContactSummary]:
        """Resolve contact IDs to name/surname projections, keeping order and duplicates"""
        pass
