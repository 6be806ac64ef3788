from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .logout_user import LogoutUserUseCase
from .refresh_session import RefreshSessionUseCase
from .check_session import CheckSessionUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RefreshSessionUseCase",
    "CheckSessionUseCase",
]
