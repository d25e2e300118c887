from .user import User, normalize_email
from .transaction import Transaction, TransactionType
from .transaction_query import TransactionQuery, SortDirection, SORTABLE_FIELDS

__all__ = [
    "User",
    "normalize_email",
    "Transaction",
    "TransactionType",
    "TransactionQuery",
    "SortDirection",
    "SORTABLE_FIELDS",
]
