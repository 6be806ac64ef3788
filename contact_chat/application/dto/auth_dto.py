from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from ...core.security import BCRYPT_MAX_PASSWORD_BYTES


def _check_password_bytes(value: str) -> str:
    if len(value.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValueError(f"password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return value


class UserRegistrationRequest(BaseModel):
    """DTO for user registration request"""
    name: str = Field(max_length=200)
    surname: str = Field(max_length=200)
    email: EmailStr
    password: str = Field(min_length=1, max_length=BCRYPT_MAX_PASSWORD_BYTES)
    bio: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class UserLoginRequest(BaseModel):
    """DTO for user login request"""
    email: EmailStr
    password: str = Field(min_length=1, max_length=BCRYPT_MAX_PASSWORD_BYTES)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return _check_password_bytes(value)


class SessionResponse(BaseModel):
    """DTO for a freshly created session"""
    session_secret: str
