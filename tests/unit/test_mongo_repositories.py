"""
Unit tests for the MongoDB repositories with a mocked Motor collection.
"""
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from smartspend.core.exceptions import DuplicateIdentityError, RepositoryError
from smartspend.domain.models.transaction import Transaction, TransactionType
from smartspend.domain.models.transaction_query import SortDirection, TransactionQuery
from smartspend.domain.models.user import User
from smartspend.infrastructure.db.mongo_connection import ensure_indexes
from smartspend.infrastructure.db.mongo_transaction_repository import MongoTransactionRepository
from smartspend.infrastructure.db.mongo_user_repository import MongoUserRepository


OWNER = ObjectId()
WHEN = datetime(2025, 3, 1, 9, 30, tzinfo=timezone.utc)


class FakeCursor:
    """Async iterable standing in for a Motor cursor"""

    def __init__(self, documents):
        self.documents = list(documents)
        self.sort_spec = None

    def sort(self, spec):
        self.sort_spec = spec
        return self

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for document in self.documents:
            yield document


def _transaction_document(**overrides):
    document = {
        "_id": ObjectId(),
        "user": OWNER,
        "type": "expense",
        "category": "Food",
        "amount": 12.5,
        "description": "",
        "date": WHEN.replace(tzinfo=None),
        "createdAt": WHEN,
        "updatedAt": WHEN,
    }
    document.update(overrides)
    return document


@pytest.fixture
def user_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    return collection


@pytest.fixture
def transaction_collection():
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    return collection


class TestMongoUserRepository:
    @pytest.mark.asyncio
    async def test_find_by_email_hides_password_hash(self, user_collection):
        user_collection.find_one.return_value = {"_id": ObjectId(), "name": "Ada", "email": "ada@x.com"}
        repository = MongoUserRepository(user_collection)

        user = await repository.find_by_email("  ADA@x.com ")

        user_collection.find_one.assert_awaited_once_with({"email": "ada@x.com"}, {"passwordHash": 0})
        assert user.email == "ada@x.com"
        assert user.password_hash is None

    @pytest.mark.asyncio
    async def test_find_by_email_for_credential_check_loads_hash(self, user_collection):
        user_collection.find_one.return_value = {
            "_id": ObjectId(),
            "name": "Ada",
            "email": "ada@x.com",
            "passwordHash": "$2b$04$hash",
        }
        repository = MongoUserRepository(user_collection)

        user = await repository.find_by_email("ada@x.com", include_password_hash=True)

        user_collection.find_one.assert_awaited_once_with({"email": "ada@x.com"}, None)
        assert user.password_hash == "$2b$04$hash"

    @pytest.mark.asyncio
    async def test_find_by_id_with_malformed_id(self, user_collection):
        repository = MongoUserRepository(user_collection)
        assert await repository.find_by_id("not-an-object-id") is None
        user_collection.find_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_stores_hash_but_does_not_return_it(self, user_collection):
        inserted_id = ObjectId()
        user_collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        repository = MongoUserRepository(user_collection)

        saved = await repository.create(User(id=None, name="Ada", email="ada@x.com", password_hash="h"))

        stored = user_collection.insert_one.await_args.args[0]
        assert stored["passwordHash"] == "h"
        assert stored["createdAt"] == stored["updatedAt"]
        assert saved.id == str(inserted_id)
        assert saved.password_hash is None

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_duplicate_identity(self, user_collection):
        user_collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key")
        repository = MongoUserRepository(user_collection)

        with pytest.raises(DuplicateIdentityError):
            await repository.create(User(id=None, name="Ada", email="ada@x.com", password_hash="h"))

    @pytest.mark.asyncio
    async def test_driver_failure_becomes_repository_error(self, user_collection):
        user_collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        repository = MongoUserRepository(user_collection)

        with pytest.raises(RepositoryError):
            await repository.find_by_email("ada@x.com")


class TestMongoTransactionRepository:
    @pytest.mark.asyncio
    async def test_find_by_owner_scopes_and_sorts(self, transaction_collection):
        cursor = FakeCursor([_transaction_document(), _transaction_document(amount=3)])
        transaction_collection.find.return_value = cursor
        repository = MongoTransactionRepository(transaction_collection)
        query = TransactionQuery(
            type=TransactionType.EXPENSE,
            sort_field="amount",
            sort_direction=SortDirection.ASC,
        )

        result = await repository.find_by_owner(str(OWNER), query)

        mongo_filter = transaction_collection.find.call_args.args[0]
        assert mongo_filter["user"] == OWNER
        assert mongo_filter["type"] == "expense"
        assert cursor.sort_spec == [("amount", 1)]
        assert [t.amount for t in result] == [12.5, 3]
        assert result[0].owner_id == str(OWNER)
        assert result[0].date.tzinfo is not None

    @pytest.mark.asyncio
    async def test_find_by_owner_with_malformed_owner(self, transaction_collection):
        repository = MongoTransactionRepository(transaction_collection)
        assert await repository.find_by_owner("bogus", TransactionQuery()) == []
        transaction_collection.find.assert_not_called()

    @pytest.mark.asyncio
    async def test_find_by_id_matches_owner_too(self, transaction_collection):
        document = _transaction_document()
        transaction_collection.find_one.return_value = document
        repository = MongoTransactionRepository(transaction_collection)

        result = await repository.find_by_id_for_owner(str(document["_id"]), str(OWNER))

        transaction_collection.find_one.assert_awaited_once_with({"_id": document["_id"], "user": OWNER})
        assert result.id == str(document["_id"])

    @pytest.mark.asyncio
    async def test_malformed_transaction_id_matches_nothing(self, transaction_collection):
        repository = MongoTransactionRepository(transaction_collection)

        assert await repository.find_by_id_for_owner("123", str(OWNER)) is None
        assert await repository.update_for_owner("123", str(OWNER), {"amount": 5}) is None
        assert await repository.delete_for_owner("123", str(OWNER)) is False
        transaction_collection.find_one.assert_not_awaited()
        transaction_collection.delete_one.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_stores_owner_as_object_id(self, transaction_collection):
        inserted_id = ObjectId()
        transaction_collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        repository = MongoTransactionRepository(transaction_collection)
        transaction = Transaction(
            id=None,
            owner_id=str(OWNER),
            type=TransactionType.INCOME,
            category="Salary",
            amount=100,
            date=WHEN,
        )

        saved = await repository.create(transaction)

        stored = transaction_collection.insert_one.await_args.args[0]
        assert stored["user"] == OWNER
        assert stored["type"] == "income"
        assert saved.id == str(inserted_id)
        assert saved.owner_id == str(OWNER)

    @pytest.mark.asyncio
    async def test_update_is_scoped_and_sets_updated_at(self, transaction_collection):
        document = _transaction_document(amount=50)
        transaction_collection.find_one_and_update.return_value = document
        repository = MongoTransactionRepository(transaction_collection)

        result = await repository.update_for_owner(
            str(document["_id"]), str(OWNER), {"amount": 50, "type": TransactionType.EXPENSE}
        )

        args = transaction_collection.find_one_and_update.await_args
        assert args.args[0] == {"_id": document["_id"], "user": OWNER}
        update = args.args[1]["$set"]
        assert update["amount"] == 50
        assert update["type"] == "expense"
        assert "updatedAt" in update
        assert "user" not in update
        assert args.kwargs["return_document"] == ReturnDocument.AFTER
        assert result.amount == 50

    @pytest.mark.asyncio
    async def test_update_rejects_immutable_fields(self, transaction_collection):
        repository = MongoTransactionRepository(transaction_collection)
        with pytest.raises(ValueError):
            await repository.update_for_owner(str(ObjectId()), str(OWNER), {"owner_id": str(ObjectId())})

    @pytest.mark.asyncio
    async def test_delete_reports_whether_anything_was_removed(self, transaction_collection):
        transaction_collection.delete_one.return_value = MagicMock(deleted_count=0)
        repository = MongoTransactionRepository(transaction_collection)

        assert await repository.delete_for_owner(str(ObjectId()), str(OWNER)) is False


class TestEnsureIndexes:
    @pytest.mark.asyncio
    async def test_unique_email_and_owner_date_indexes(self):
        users = MagicMock(create_index=AsyncMock())
        transactions = MagicMock(create_index=AsyncMock())
        database = {"users": users, "transactions": transactions}

        await ensure_indexes(database)

        users.create_index.assert_awaited_once_with([("email", 1)], unique=True, name="email_unique")
        transactions.create_index.assert_awaited_once_with([("user", 1), ("date", -1)], name="user_date")
