from .mongo_connection import (
    get_database,
    close_database,
    ensure_indexes,
    get_user_collection,
    get_transaction_collection,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_transaction_repository import MongoTransactionRepository
from .transaction_query_builder import build_transaction_filter, build_transaction_sort

__all__ = [
    "get_database",
    "close_database",
    "ensure_indexes",
    "get_user_collection",
    "get_transaction_collection",
    "MongoUserRepository",
    "MongoTransactionRepository",
    "build_transaction_filter",
    "build_transaction_sort",
]
