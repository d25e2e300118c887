# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    RepositoryProvider,
    TransactionProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services and use cases (AuthProvider, TransactionProvider) - depend on repositories
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → database → repositories → use cases
        """
        self.register_singleton(Settings, self.settings)

        # Step 1: Register database connections (foundation)
        DatabaseProvider.register(self)

        # Step 2: Register repositories (depends on database)
        RepositoryProvider.register(self)

        # Step 3: Register services and use cases (depends on repositories)
        AuthProvider.register(self)
        TransactionProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[DIContainer] = None


def get_container(settings: Optional[Settings] = None) -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Args:
        settings: Used only when the container is first built

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer(settings)
    return _container


def reset_container() -> None:
    """Drop the global container (application shutdown and tests)"""
    global _container
    _container = None
