from typing import Optional

from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    """DTO for user response (no password, no session secret)"""
    id: str
    name: str
    surname: str
    email: EmailStr
    bio: Optional[str] = None
