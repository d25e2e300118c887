from .config import Settings, get_settings
from .exceptions import (
    SmartSpendError,
    ValidationError,
    AuthenticationError,
    NotFoundError,
    DuplicateIdentityError,
    RepositoryError,
)
from .security import (
    hash_password,
    verify_password,
    TokenService,
)

__all__ = [
    "Settings",
    "get_settings",
    "SmartSpendError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "DuplicateIdentityError",
    "RepositoryError",
    "hash_password",
    "verify_password",
    "TokenService",
]
