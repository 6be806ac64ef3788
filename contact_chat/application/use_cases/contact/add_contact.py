# Standard library imports
from typing import Optional

# Local application imports
from ...services.contact_manager import ContactManager
from ...dto.contact_dto import AddContactRequest, ContactOperationResult


class AddContactUseCase:
    """Use case for adding a contact to the session owner's list"""

    def __init__(self, contact_manager: ContactManager) -> None:
        self.contact_manager = contact_manager

    async def execute(self, session_secret: Optional[str], request: AddContactRequest) -> ContactOperationResult:
        """
        Add a contact by email

        Args:
            session_secret: Session of the requesting user
            request: Request carrying the contact's email

        Returns:
            ContactOperationResult (never raises)
        """
        return await self.contact_manager.add_contact(session_secret, request.email)
