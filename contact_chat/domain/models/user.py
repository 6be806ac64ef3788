# Standard library imports
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import ValidationError


NAME_PATTERN = re.compile(r"^[a-zA-Z\s-]{3,}$")
EMAIL_PATTERN = re.compile(r"^\w+(?:[.-]\w+)*@\w+(?:[.-]\w+)*\.\w{2,3}$", re.ASCII)
EMAIL_MAX_LENGTH = 254


def normalize_email(email: Optional[str]) -> str:
    """Lowercase and strip an email address for storage and lookup"""
    return (email or "").strip().lower()


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies.

    `password` holds a bcrypt hash once persisted. When it is set from
    plaintext (on registration or through set_password) `password_modified`
    is raised so the store knows to hash it before the next write.
    """
    id: Optional[str]
    name: str
    surname: str
    email: str
    password: str
    bio: Optional[str] = None
    session_secret: Optional[str] = None
    last_accessed: Optional[datetime] = None
    contacts: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    password_modified: bool = field(default=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Business validations"""
        self.email = normalize_email(self.email)
        self.validate()

    def validate(self) -> None:
        """
        Check every field shape

        Raises:
            ValidationError: naming the first offending field
        """
        for field_name in ("name", "surname"):
            value = getattr(self, field_name)
            if not value:
                raise ValidationError(field_name, "can't be blank")
            if not NAME_PATTERN.match(value):
                raise ValidationError(field_name, "is invalid")

        if not self.email:
            raise ValidationError("email", "can't be blank")
        if len(self.email) > EMAIL_MAX_LENGTH or not EMAIL_PATTERN.match(self.email):
            raise ValidationError("email", "is invalid")

        if not self.password:
            raise ValidationError("password", "can't be blank")

    def set_password(self, plain_password: str) -> None:
        """Replace the password with a plaintext value to be hashed on save"""
        self.password = plain_password
        self.password_modified = True

    @property
    def has_session(self) -> bool:
        return self.session_secret is not None
