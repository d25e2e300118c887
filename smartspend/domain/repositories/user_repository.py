from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_email(self, email: str, include_password_hash: bool = False) -> Optional[User]:
        """Find user by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID (password hash never loaded)"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user; raises DuplicateIdentityError if the email is taken"""
        pass
