# Standard library imports
from typing import Optional

# Local application imports
from ...services.contact_manager import ContactManager
from ...dto.contact_dto import ContactListResult


class ListContactsUseCase:
    """Use case for listing the session owner's contacts"""

    def __init__(self, contact_manager: ContactManager) -> None:
        self.contact_manager = contact_manager

    async def execute(self, session_secret: Optional[str]) -> ContactListResult:
        return await self.contact_manager.get_contacts(session_secret)
