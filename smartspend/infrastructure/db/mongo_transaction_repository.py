# Standard library imports
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import RepositoryError
from ...domain.repositories.transaction_repository import TransactionRepository
from ...domain.models.transaction import Transaction
from ...domain.models.transaction_query import TransactionQuery
from ...domain.constants import TransactionFields
from ...utils.datetime_utils import ensure_utc, utc_now
from .mongo_connection import get_transaction_collection
from .transaction_query_builder import build_transaction_filter, build_transaction_sort


# Domain attribute -> document field for the mutable fields
_MUTABLE_FIELDS = {
    "type": TransactionFields.TYPE,
    "category": TransactionFields.CATEGORY,
    "amount": TransactionFields.AMOUNT,
    "description": TransactionFields.DESCRIPTION,
    "date": TransactionFields.DATE,
}


def _to_object_id(value: str) -> Optional[ObjectId]:
    """Parse an ID string; malformed IDs match nothing"""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class MongoTransactionRepository(TransactionRepository):
    """MongoDB implementation of TransactionRepository"""

    def __init__(self, transaction_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.transaction_collection = (
            transaction_collection if transaction_collection is not None else get_transaction_collection()
        )

    async def find_by_owner(self, owner_id: str, query: TransactionQuery) -> List[Transaction]:
        """
        List a user's transactions

        Args:
            owner_id: The owner user ID
            query: Filters and sort order

        Returns:
            List of Transaction domain models in the requested order
        """
        owner_object_id = _to_object_id(owner_id)
        if owner_object_id is None:
            return []

        try:
            cursor = self.transaction_collection.find(
                build_transaction_filter(owner_object_id, query)
            ).sort(build_transaction_sort(query))
            transactions = []
            async for document in cursor:
                transactions.append(self._document_to_transaction(document))
            return transactions
        except PyMongoError as e:
            raise RepositoryError(f"Error listing transactions for owner: {str(e)}")

    async def find_by_id_for_owner(self, transaction_id: str, owner_id: str) -> Optional[Transaction]:
        """
        Find one transaction owned by the user

        Returns:
            Transaction domain model if found and owned, None otherwise
        """
        scoped_filter = self._owned_filter(transaction_id, owner_id)
        if scoped_filter is None:
            return None

        try:
            document = await self.transaction_collection.find_one(scoped_filter)
        except PyMongoError as e:
            raise RepositoryError(f"Error finding transaction by ID: {str(e)}")

        if document is None:
            return None
        return self._document_to_transaction(document)

    async def create(self, transaction: Transaction) -> Transaction:
        """
        Insert a new transaction

        Args:
            transaction: Transaction domain model (id must be None)

        Returns:
            Saved Transaction domain model with ID set
        """
        owner_object_id = _to_object_id(transaction.owner_id)
        if owner_object_id is None:
            raise ValueError(f"Invalid owner ID format: {transaction.owner_id}")

        now = utc_now()
        document = {
            TransactionFields.USER: owner_object_id,
            TransactionFields.TYPE: transaction.type.value,
            TransactionFields.CATEGORY: transaction.category,
            TransactionFields.AMOUNT: transaction.amount,
            TransactionFields.DESCRIPTION: transaction.description,
            TransactionFields.DATE: transaction.date,
            TransactionFields.CREATED_AT: transaction.created_at or now,
            TransactionFields.UPDATED_AT: transaction.updated_at or now,
        }

        try:
            result = await self.transaction_collection.insert_one(document)
        except PyMongoError as e:
            raise RepositoryError(f"Error saving transaction: {str(e)}")

        document[TransactionFields.MONGO_ID] = result.inserted_id
        return self._document_to_transaction(document)

    async def update_for_owner(
        self,
        transaction_id: str,
        owner_id: str,
        changes: Dict[str, Any],
    ) -> Optional[Transaction]:
        """
        Apply field changes to an owned transaction in a single atomic write

        Args:
            transaction_id: ID of the transaction
            owner_id: The owner user ID
            changes: Domain attribute name -> new value (mutable fields only)

        Returns:
            Updated Transaction domain model, or None if not found/owned
        """
        unknown = set(changes) - set(_MUTABLE_FIELDS)
        if unknown:
            raise ValueError(f"Fields cannot be updated: {sorted(unknown)}")

        scoped_filter = self._owned_filter(transaction_id, owner_id)
        if scoped_filter is None:
            return None

        update_fields = {
            _MUTABLE_FIELDS[name]: getattr(value, "value", value)
            for name, value in changes.items()
        }
        update_fields[TransactionFields.UPDATED_AT] = utc_now()

        try:
            document = await self.transaction_collection.find_one_and_update(
                scoped_filter,
                {"$set": update_fields},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise RepositoryError(f"Error updating transaction: {str(e)}")

        if document is None:
            return None
        return self._document_to_transaction(document)

    async def delete_for_owner(self, transaction_id: str, owner_id: str) -> bool:
        """
        Delete an owned transaction

        Returns:
            True if a transaction was deleted, False if not found/owned
        """
        scoped_filter = self._owned_filter(transaction_id, owner_id)
        if scoped_filter is None:
            return False

        try:
            result = await self.transaction_collection.delete_one(scoped_filter)
        except PyMongoError as e:
            raise RepositoryError(f"Error deleting transaction: {str(e)}")

        return result.deleted_count > 0

    def _owned_filter(self, transaction_id: str, owner_id: str) -> Optional[Dict[str, Any]]:
        """Filter matching one transaction and its owner, or None if either ID is malformed"""
        transaction_object_id = _to_object_id(transaction_id)
        owner_object_id = _to_object_id(owner_id)
        if transaction_object_id is None or owner_object_id is None:
            return None
        return {
            TransactionFields.MONGO_ID: transaction_object_id,
            TransactionFields.USER: owner_object_id,
        }

    def _document_to_transaction(self, document: dict) -> Transaction:
        """
        Convert MongoDB document to Transaction domain model

        Args:
            document: MongoDB document dictionary

        Returns:
            Transaction domain model
        """
        if not document or TransactionFields.MONGO_ID not in document:
            raise RepositoryError("Invalid document: missing _id field")

        return Transaction(
            id=str(document[TransactionFields.MONGO_ID]),
            owner_id=str(document.get(TransactionFields.USER, "")),
            type=document.get(TransactionFields.TYPE),
            category=document.get(TransactionFields.CATEGORY, ""),
            amount=document.get(TransactionFields.AMOUNT, 0),
            description=document.get(TransactionFields.DESCRIPTION, ""),
            date=ensure_utc(document.get(TransactionFields.DATE)),
            created_at=ensure_utc(document.get(TransactionFields.CREATED_AT)),
            updated_at=ensure_utc(document.get(TransactionFields.UPDATED_AT)),
        )
