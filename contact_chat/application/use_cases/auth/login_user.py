# Local application imports
from ....domain.exceptions import DatabaseError, InvalidCredentials
from ...services.user_store import UserStore
from ...services.session_manager import SessionManager
from ...dto.auth_dto import UserLoginRequest, SessionResponse


class LoginUserUseCase:
    """Use case for authenticating a user and opening a session"""

    def __init__(self, user_store: UserStore, session_manager: SessionManager) -> None:
        self.user_store = user_store
        self.session_manager = session_manager

    async def execute(self, request: UserLoginRequest) -> SessionResponse:
        """
        Authenticate user and create a session secret

        Args:
            request: Login request with email and password

        Returns:
            SessionResponse carrying the new session secret

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong
            DatabaseError: If the session could not be stored
        """
        # Find user by email
        user = await self.user_store.find_by_email(request.email)
        if user is None:
            raise InvalidCredentials()

        # Verify password
        if not self.user_store.verify_password(user, request.password):
            raise InvalidCredentials()

        session_secret = await self.session_manager.create_session(user)
        if session_secret is None:
            raise DatabaseError("Could not create session")

        return SessionResponse(session_secret=session_secret)
