"""
Shared pytest fixtures for SmartSpend tests.

Repositories are replaced by in-memory implementations of the domain
interfaces, so nothing here needs a running MongoDB.
"""
import os
from dataclasses import replace
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, patch

import pytest
from bson import ObjectId
from bson.errors import InvalidId

from smartspend.core.config import Settings
from smartspend.core.exceptions import DuplicateIdentityError
from smartspend.core.security import TokenService
from smartspend.di.base_container import BaseContainer
from smartspend.di.providers import AuthProvider, TransactionProvider
from smartspend.domain.models.transaction import Transaction
from smartspend.domain.models.transaction_query import SortDirection, TransactionQuery
from smartspend.domain.models.user import User, normalize_email
from smartspend.domain.repositories.transaction_repository import TransactionRepository
from smartspend.domain.repositories.user_repository import UserRepository
from smartspend.utils.datetime_utils import utc_now


TEST_ENV = {
    "MONGO_URI": "mongodb://localhost:27017",
    "MONGO_DB_NAME": "test_smartspend",
    "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
    "JWT_ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_MINUTES": "10080",
    # Lowest cost bcrypt accepts; keeps the suite fast
    "BCRYPT_ROUNDS": "4",
    "LOG_LEVEL": "WARNING",
}


def _parse_id(value: str) -> Optional[ObjectId]:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class InMemoryUserRepository(UserRepository):
    """UserRepository backed by a dict, mirroring the Mongo projection rules"""

    def __init__(self) -> None:
        self.users: Dict[str, User] = {}

    async def find_by_email(self, email: str, include_password_hash: bool = False) -> Optional[User]:
        email = normalize_email(email)
        for user in self.users.values():
            if user.email == email:
                return user if include_password_hash else replace(user, password_hash=None)
        return None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        if _parse_id(user_id) is None or user_id not in self.users:
            return None
        return replace(self.users[user_id], password_hash=None)

    async def create(self, user: User) -> User:
        if any(existing.email == user.email for existing in self.users.values()):
            raise DuplicateIdentityError("duplicate email")
        now = utc_now()
        stored = replace(user, id=str(ObjectId()), created_at=now, updated_at=now)
        self.users[stored.id] = stored
        return replace(stored, password_hash=None)


_SORT_ATTRIBUTES = {
    "date": "date",
    "amount": "amount",
    "category": "category",
    "type": "type",
    "createdAt": "created_at",
}


class InMemoryTransactionRepository(TransactionRepository):
    """TransactionRepository backed by a dict, scoped by owner like the Mongo one"""

    def __init__(self) -> None:
        self.transactions: Dict[str, Transaction] = {}

    async def find_by_owner(self, owner_id: str, query: TransactionQuery) -> List[Transaction]:
        matches = []
        for transaction in self.transactions.values():
            if transaction.owner_id != owner_id:
                continue
            if query.type is not None and transaction.type != query.type:
                continue
            if query.category and transaction.category != query.category:
                continue
            if query.date_from is not None and transaction.date < query.date_from:
                continue
            if query.date_to is not None and transaction.date > query.date_to:
                continue
            matches.append(transaction)

        attribute = _SORT_ATTRIBUTES[query.sort_field]
        matches.sort(
            key=lambda t: getattr(t, attribute),
            reverse=query.sort_direction == SortDirection.DESC,
        )
        return matches

    async def find_by_id_for_owner(self, transaction_id: str, owner_id: str) -> Optional[Transaction]:
        transaction = self.transactions.get(transaction_id)
        if transaction is None or transaction.owner_id != owner_id:
            return None
        return transaction

    async def create(self, transaction: Transaction) -> Transaction:
        stored = replace(transaction, id=str(ObjectId()))
        self.transactions[stored.id] = stored
        return stored

    async def update_for_owner(
        self,
        transaction_id: str,
        owner_id: str,
        changes: Dict[str, Any],
    ) -> Optional[Transaction]:
        existing = await self.find_by_id_for_owner(transaction_id, owner_id)
        if existing is None:
            return None
        updated = replace(existing, updated_at=utc_now(), **changes)
        self.transactions[transaction_id] = updated
        return updated

    async def delete_for_owner(self, transaction_id: str, owner_id: str) -> bool:
        if await self.find_by_id_for_owner(transaction_id, owner_id) is None:
            return False
        del self.transactions[transaction_id]
        return True


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    with patch.dict(os.environ, TEST_ENV, clear=False):
        yield TEST_ENV


@pytest.fixture
def test_settings(mock_env) -> Settings:
    """Real Settings object built from the test environment."""
    return Settings()


@pytest.fixture
def token_service(test_settings) -> TokenService:
    return TokenService(test_settings)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_transaction_repo():
    """Mock TransactionRepository with async methods."""
    return AsyncMock(spec=TransactionRepository)


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def transaction_repo() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository()


@pytest.fixture
def test_container(test_settings, user_repo, transaction_repo) -> BaseContainer:
    """DI container wired like production, but with in-memory repositories."""
    container = BaseContainer()
    container.register_singleton(Settings, test_settings)
    container.register_singleton(UserRepository, user_repo)
    container.register_singleton(TransactionRepository, transaction_repo)
    AuthProvider.register(container)
    TransactionProvider.register(container)
    return container


@pytest.fixture
def client(test_container):
    """TestClient whose requests resolve dependencies from test_container."""
    from fastapi.testclient import TestClient
    from smartspend.main import app

    with patch("smartspend.di.container._container", test_container):
        with TestClient(app) as c:
            yield c
