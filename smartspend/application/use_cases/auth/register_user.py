# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....core.exceptions import DuplicateIdentityError
from ....core.security import DEFAULT_BCRYPT_ROUNDS, TokenService, hash_password
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user and logging them in"""

    def __init__(
        self,
        user_repository: UserRepository,
        token_service: TokenService,
        bcrypt_rounds: int = DEFAULT_BCRYPT_ROUNDS,
    ) -> None:
        self.user_repository = user_repository
        self.token_service = token_service
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Signup request with name, email and password

        Returns:
            AuthResponse with the created user and an access token

        Raises:
            DuplicateIdentityError: If a user with this email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateIdentityError(f"Signup rejected: email {request.email} already registered")

        # bcrypt is CPU bound; keep it off the event loop
        password_hash = await asyncio.to_thread(
            hash_password, request.password, self.bcrypt_rounds
        )

        new_user = User(
            id=None,  # Will be set by repository
            name=request.name,
            email=request.email,
            password_hash=password_hash,
        )

        # The unique email index still rejects a concurrent duplicate signup here
        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.id}")

        return AuthResponse(
            user=UserResponse.from_domain(saved_user),
            token=self.token_service.issue(saved_user.id or ""),
        )
