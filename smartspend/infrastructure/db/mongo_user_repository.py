# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...core.exceptions import DuplicateIdentityError, RepositoryError
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, normalize_email
from ...domain.constants import UserFields
from ...utils.datetime_utils import utc_now
from .mongo_connection import get_user_collection


# Default projection: the password hash never leaves the store unless asked for
PUBLIC_PROJECTION = {UserFields.PASSWORD_HASH: 0}


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str, include_password_hash: bool = False) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for (matched case-insensitively)
            include_password_hash: Load the password hash (credential check only)

        Returns:
            User domain model if found, None otherwise
        """
        email = normalize_email(email)
        if not email:
            return None

        projection = None if include_password_hash else PUBLIC_PROJECTION
        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email}, projection)
        except PyMongoError as e:
            raise RepositoryError(f"Error finding user by email: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.user_collection.find_one(
                {UserFields.MONGO_ID: object_id}, PUBLIC_PROJECTION
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error finding user by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_user(document)

    async def create(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to save (id must be None)

        Returns:
            Saved User domain model with ID set; the password hash is not returned

        Raises:
            DuplicateIdentityError: If the unique email index rejects the insert
        """
        if user.id:
            raise ValueError("Users are immutable once created")

        now = utc_now()
        user_dict = {
            UserFields.NAME: user.name,
            UserFields.EMAIL: user.email,
            UserFields.PASSWORD_HASH: user.password_hash,
            UserFields.CREATED_AT: now,
            UserFields.UPDATED_AT: now,
        }

        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise DuplicateIdentityError(f"Signup rejected: email {user.email} already registered")
        except PyMongoError as e:
            raise RepositoryError(f"Error saving user: {str(e)}")

        return User(
            id=str(result.inserted_id),
            name=user.name,
            email=user.email,
            created_at=now,
            updated_at=now,
        )

    def _document_to_user(self, document: dict) -> User:
        """
        Convert MongoDB document to User domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            name=document.get(UserFields.NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            password_hash=document.get(UserFields.PASSWORD_HASH),
            created_at=document.get(UserFields.CREATED_AT),
            updated_at=document.get(UserFields.UPDATED_AT),
        )
