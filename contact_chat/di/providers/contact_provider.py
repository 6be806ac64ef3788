from typing import TYPE_CHECKING
from ...application.services.contact_manager import ContactManager
from ...application.use_cases.contact.add_contact import AddContactUseCase
from ...application.use_cases.contact.list_contacts import ListContactsUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ContactProvider:
    """Contact use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            AddContactUseCase,
            lambda: AddContactUseCase(
                contact_manager=container.get(ContactManager)
            )
        )

        container.register_factory(
            ListContactsUseCase,
            lambda: ListContactsUseCase(
                contact_manager=container.get(ContactManager)
            )
        )
