from .add_contact import AddContactUseCase
from .list_contacts import ListContactsUseCase

__all__ = [
    "AddContactUseCase",
    "ListContactsUseCase",
]
