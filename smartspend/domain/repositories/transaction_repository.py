from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from ..models.transaction import Transaction
from ..models.transaction_query import TransactionQuery


class TransactionRepository(ABC):
    """
    Repository interface - defines contract for transaction data access.

    Every lookup takes the owner's user ID; a transaction owned by someone
    else is indistinguishable from one that does not exist.
    """

    @abstractmethod
    async def find_by_owner(self, owner_id: str, query: TransactionQuery) -> List[Transaction]:
        """List a user's transactions matching the query, in the requested order"""
        pass

    @abstractmethod
    async def find_by_id_for_owner(self, transaction_id: str, owner_id: str) -> Optional[Transaction]:
        """Find one transaction owned by the user"""
        pass

    @abstractmethod
    async def create(self, transaction: Transaction) -> Transaction:
        """Insert a new transaction"""
        pass

    @abstractmethod
    async def update_for_owner(
        self,
        transaction_id: str,
        owner_id: str,
        changes: Dict[str, Any],
    ) -> Optional[Transaction]:
        """Apply field changes to an owned transaction; None if not found"""
        pass

    @abstractmethod
    async def delete_for_owner(self, transaction_id: str, owner_id: str) -> bool:
        """Delete an owned transaction; False if not found"""
        pass
