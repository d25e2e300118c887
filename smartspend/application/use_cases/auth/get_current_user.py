# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....core.exceptions import NotFoundError
from ...dto.user_dto import UserResponse


class GetCurrentUserUseCase:
    """Use case for loading the authenticated user's profile"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get current user by the ID carried in their token

        Args:
            user_id: Authenticated user ID

        Returns:
            UserResponse with user information

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found", user_message="User not found")

        return UserResponse.from_domain(user)
