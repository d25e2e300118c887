"""
Unit tests for the domain models' business validations.
"""
from datetime import datetime, timezone

import pytest
from smartspend.core.exceptions import ValidationError
from smartspend.domain.models.transaction import Transaction, TransactionType
from smartspend.domain.models.transaction_query import SortDirection, TransactionQuery
from smartspend.domain.models.user import User


NOW = datetime(2025, 5, 1, tzinfo=timezone.utc)


def _transaction(**overrides) -> Transaction:
    fields = dict(
        id=None,
        owner_id="owner-1",
        type="expense",
        category="Food",
        amount=12.5,
        date=NOW,
    )
    fields.update(overrides)
    return Transaction(**fields)


class TestUser:
    def test_email_normalized(self):
        user = User(id=None, name="  Ada ", email=" Ada@X.com ")
        assert user.email == "ada@x.com"
        assert user.name == "Ada"

    def test_name_too_long(self):
        with pytest.raises(ValidationError):
            User(id=None, name="a" * 51, email="ada@x.com")

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Name is required"):
            User(id=None, name="   ", email="ada@x.com")

    def test_repr_hides_password_hash(self):
        user = User(id="u1", name="Ada", email="ada@x.com", password_hash="$2b$12$secret")
        assert "secret" not in repr(user)


class TestTransaction:
    def test_defaults_and_coercion(self):
        transaction = _transaction(type="income", amount=5, category=" Salary ")
        assert transaction.type is TransactionType.INCOME
        assert transaction.amount == 5.0
        assert transaction.category == "Salary"
        assert transaction.description == ""

    def test_invalid_type(self):
        with pytest.raises(ValidationError, match="Type must be"):
            _transaction(type="transfer")

    @pytest.mark.parametrize("amount", [0, -1, "12", None, True])
    def test_invalid_amount(self, amount):
        with pytest.raises(ValidationError, match="Amount must be greater than 0"):
            _transaction(amount=amount)

    def test_empty_category(self):
        with pytest.raises(ValidationError, match="Category is required"):
            _transaction(category="  ")

    def test_owner_required(self):
        with pytest.raises(ValidationError):
            _transaction(owner_id="")


class TestTransactionQuery:
    def test_defaults(self):
        query = TransactionQuery()
        assert query.sort_field == "date"
        assert query.sort_direction is SortDirection.DESC

    def test_unknown_sort_field_rejected(self):
        with pytest.raises(ValidationError, match="Invalid sort field"):
            TransactionQuery(sort_field="user")

    def test_inverted_date_range_rejected(self):
        with pytest.raises(ValidationError):
            TransactionQuery(
                date_from=datetime(2025, 2, 1, tzinfo=timezone.utc),
                date_to=datetime(2025, 1, 1, tzinfo=timezone.utc),
            )
