from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import TokenService
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the token service and all auth-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the token service (singleton, signing key read once) and the
        authentication use cases (created on-demand via factories).
        """
        settings: Settings = container.get(Settings)
        container.register_singleton(TokenService, TokenService(settings))

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
                bcrypt_rounds=settings.bcrypt_rounds,
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            GetCurrentUserUseCase,
            lambda: GetCurrentUserUseCase(
                user_repository=container.get(UserRepository)
            )
        )
