# Standard library imports
import logging
from typing import Optional

# Local application imports
from ...domain.exceptions import InvalidContact, InvalidSession
from ..dto.contact_dto import (
    ContactOperationResult,
    ContactListResult,
    ContactResponse,
    INVALID_SESSION,
    INVALID_CONTACT,
    ADD_CONTACT_ERROR,
    LIST_CONTACTS_ERROR,
)
from .session_manager import SessionManager
from .user_store import UserStore

logger = logging.getLogger(__name__)


class ContactManager:
    """Contact list operations for the owner of a live session"""

    def __init__(self, session_manager: SessionManager, user_store: UserStore) -> None:
        self.session_manager = session_manager
        self.user_store = user_store

    async def add_contact(self, session_secret: Optional[str], contact_email: str) -> ContactOperationResult:
        """
        Add the user registered under contact_email to the session owner's contacts

        Args:
            session_secret: Session of the user adding the contact
            contact_email: Email of the user to add

        Returns:
            ContactOperationResult; on failure `error` is one of
            "Invalid session", "Invalid contact", "An error occurred."
        """
        try:
            user = await self.session_manager.resolve_user(session_secret)
            if user is None:
                raise InvalidSession()

            contact = await self.user_store.find_by_email(contact_email)
            if contact is None:
                raise InvalidContact()

            if not await self.user_store.add_contact(user, contact):
                # Owner vanished between lookup and update
                raise InvalidSession()
        except InvalidSession:
            return ContactOperationResult.failure(INVALID_SESSION)
        except InvalidContact:
            return ContactOperationResult.failure(INVALID_CONTACT)
        except Exception as e:
            logger.error(f"Error adding contact: {e}", exc_info=True)
            return ContactOperationResult.failure(ADD_CONTACT_ERROR)

        logger.info(f"User {user.id} added contact {contact.id}")
        return ContactOperationResult.success()

    async def get_contacts(self, session_secret: Optional[str]) -> ContactListResult:
        """
        List the session owner's contacts as name/surname pairs

        Returns:
            ContactListResult; on failure `error` is one of
            "Invalid session", "Database error occurred."
        """
        try:
            user = await self.session_manager.resolve_user(session_secret)
            if user is None:
                return ContactListResult.failure(INVALID_SESSION)
            summaries = await self.user_store.get_contacts(user)
        except Exception as e:
            logger.error(f"Error listing contacts: {e}", exc_info=True)
            return ContactListResult.failure(LIST_CONTACTS_ERROR)

        return ContactListResult.success([
            ContactResponse(name=summary.name, surname=summary.surname)
            for summary in summaries
        ])
