from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr


INVALID_SESSION = "Invalid session"
INVALID_CONTACT = "Invalid contact"
ADD_CONTACT_ERROR = "An error occurred."
LIST_CONTACTS_ERROR = "Database error occurred."


class AddContactRequest(BaseModel):
    """DTO for adding a contact by email"""
    email: EmailStr


class ContactResponse(BaseModel):
    """DTO for a contact - name and surname only"""
    model_config = ConfigDict(extra="forbid")

    name: str
    surname: str


class ContactOperationResult(BaseModel):
    """Outcome of a contact mutation: success, or failure with a reason"""
    result: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "ContactOperationResult":
        return cls(result=True)

    @classmethod
    def failure(cls, reason: str) -> "ContactOperationResult":
        return cls(result=False, error=reason)


class ContactListResult(BaseModel):
    """Outcome of a contact listing: the contacts, or failure with a reason"""
    result: bool
    error: Optional[str] = None
    contact_list: List[ContactResponse] = []

    @classmethod
    def success(cls, contact_list: List[ContactResponse]) -> "ContactListResult":
        return cls(result=True, contact_list=contact_list)

    @classmethod
    def failure(cls, reason: str) -> "ContactListResult":
        return cls(result=False, error=reason)
