from typing import TYPE_CHECKING
from ...application.services.user_store import UserStore
from ...application.services.session_manager import SessionManager
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.logout_user import LogoutUserUseCase
from ...application.use_cases.auth.refresh_session import RefreshSessionUseCase
from ...application.use_cases.auth.check_session import CheckSessionUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication use case provider - registers all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all authentication use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_store=container.get(UserStore)
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_store=container.get(UserStore),
                session_manager=container.get(SessionManager),
            )
        )

        container.register_factory(
            LogoutUserUseCase,
            lambda: LogoutUserUseCase(
                session_manager=container.get(SessionManager)
            )
        )

        container.register_factory(
            RefreshSessionUseCase,
            lambda: RefreshSessionUseCase(
                session_manager=container.get(SessionManager)
            )
        )

        container.register_factory(
            CheckSessionUseCase,
            lambda: CheckSessionUseCase(
                session_manager=container.get(SessionManager)
            )
        )
