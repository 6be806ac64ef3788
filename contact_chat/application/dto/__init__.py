from .auth_dto import UserRegistrationRequest, UserLoginRequest, SessionResponse
from .user_dto import UserResponse
from .contact_dto import (
    AddContactRequest,
    ContactResponse,
    ContactOperationResult,
    ContactListResult,
    INVALID_SESSION,
    INVALID_CONTACT,
    ADD_CONTACT_ERROR,
    LIST_CONTACTS_ERROR,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "SessionResponse",
    "UserResponse",
    "AddContactRequest",
    "ContactResponse",
    "ContactOperationResult",
    "ContactListResult",
    "INVALID_SESSION",
    "INVALID_CONTACT",
    "ADD_CONTACT_ERROR",
    "LIST_CONTACTS_ERROR",
]
