"""Constants for domain model field names"""

from .user_fields import UserFields
from .transaction_fields import TransactionFields

__all__ = [
    "UserFields",
    "TransactionFields",
]
