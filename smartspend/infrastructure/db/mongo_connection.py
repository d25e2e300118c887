# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...core.config import Settings, get_settings
from ...domain.constants import TransactionFields, UserFields

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
TRANSACTIONS_COLLECTION = "transactions"

# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(settings: Optional[Settings] = None) -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    The Motor client owns the connection pool shared by all requests; it
    connects lazily on first use.

    Returns:
        MongoDB database instance
    """
    global _mongo_client, _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    settings = settings or get_settings()
    _mongo_client = AsyncIOMotorClient(
        settings.mongo_uri,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        connectTimeoutMS=settings.mongo_timeout_ms,
    )
    _mongo_database = _mongo_client[settings.mongo_database_name]
    return _mongo_database


def close_database() -> None:
    """Close the shared client (application shutdown)"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None


def get_user_collection(database: Optional[AsyncIOMotorDatabase] = None) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    database = database if database is not None else get_database()
    return database[USERS_COLLECTION]


def get_transaction_collection(database: Optional[AsyncIOMotorDatabase] = None) -> AsyncIOMotorCollection:
    """
    Get transactions collection from MongoDB

    Returns:
        MongoDB collection for transactions
    """
    database = database if database is not None else get_database()
    return database[TRANSACTIONS_COLLECTION]


async def ensure_indexes(database: AsyncIOMotorDatabase) -> None:
    """
    Create the indexes the application relies on (idempotent).

    - users.email unique: enforces one account per email at the store level
    - transactions (user, date desc): owner-scoped range queries
    """
    await database[USERS_COLLECTION].create_index(
        [(UserFields.EMAIL, ASCENDING)], unique=True, name="email_unique"
    )
    await database[TRANSACTIONS_COLLECTION].create_index(
        [(TransactionFields.USER, ASCENDING), (TransactionFields.DATE, DESCENDING)],
        name="user_date",
    )
    logger.info("MongoDB indexes ensured")
