from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RefreshSessionUseCase,
    CheckSessionUseCase,
)
from .contact import (
    AddContactUseCase,
    ListContactsUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshSessionUseCase",
    "CheckSessionUseCase",
    "AddContactUseCase",
    "ListContactsUseCase",
]
