# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import AuthenticationError
from ....core.security import TokenService, verify_password
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse with the user and an access token

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
                (same message in both cases)
        """
        user = await self.user_repository.find_by_email(request.email, include_password_hash=True)
        if user is None:
            logger.info("Login failed: unknown email")
            raise AuthenticationError("Unknown email", user_message=INVALID_CREDENTIALS_MESSAGE)

        password_ok = await asyncio.to_thread(verify_password, request.password, user.password_hash)
        if not password_ok:
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise AuthenticationError("Wrong password", user_message=INVALID_CREDENTIALS_MESSAGE)

        logger.info(f"User {user.id} logged in")
        return AuthResponse(
            user=UserResponse.from_domain(user),
            token=self.token_service.issue(user.id or ""),
        )
