# Local application imports
from ...services.user_store import UserStore
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_store: UserStore) -> None:
        self.user_store = user_store

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If a field has an invalid shape
            DuplicateEmail: If user with email already exists
            HashingFailure: If the password could not be hashed
            DatabaseError: If the user could not be stored
        """
        saved_user = await self.user_store.create(
            name=request.name,
            surname=request.surname,
            email=request.email,
            password=request.password,
            bio=request.bio,
        )

        return UserResponse(
            id=saved_user.id or "",
            name=saved_user.name,
            surname=saved_user.surname,
            email=saved_user.email,
            bio=saved_user.bio,
        )
