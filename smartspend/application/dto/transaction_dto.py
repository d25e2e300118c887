# Standard library imports
import math
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

# External package imports
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Local application imports
from ...domain.models.transaction import Transaction, TransactionType
from ...domain.models.transaction_query import (
    SORTABLE_FIELDS,
    SortDirection,
    TransactionQuery,
)
from ...utils.datetime_utils import end_of_day, is_date_only, parse_datetime


# -----------------------------------------------------------------------------
# Field rules shared by create and update
# -----------------------------------------------------------------------------


def _check_type(value: Any) -> TransactionType:
    try:
        return TransactionType(value)
    except ValueError:
        raise ValueError('Type must be "income" or "expense"')


def _check_category(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Category is required")
    return value.strip()


def _check_amount(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError("Amount must be greater than 0")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValueError("Amount must be greater than 0")
    if not math.isfinite(amount) or amount <= 0:
        raise ValueError("Amount must be greater than 0")
    return amount


def _check_description(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError("Description must be a string")
    return value.strip()


def _check_date(value: Any) -> datetime:
    # parse_datetime raises ValueError("Invalid date format")
    return parse_datetime(value)


class TransactionCreateRequest(BaseModel):
    """DTO for transaction creation request"""
    type: TransactionType
    category: str
    amount: float
    description: str = ""
    date: Optional[datetime] = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value):
        return _check_type(value)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, value):
        return _check_category(value)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value):
        return _check_amount(value)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value):
        return _check_description(value)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value):
        if value is None:
            return None
        return _check_date(value)


class TransactionUpdateRequest(BaseModel):
    """
    DTO for partial transaction update.

    Only fields present in the request body are applied; read them with
    changes(). Explicit nulls are rejected except for description.
    """
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    amount: Optional[float] = None
    description: Optional[str] = None
    date: Optional[datetime] = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value):
        if value is None:
            raise ValueError('Type must be "income" or "expense"')
        return _check_type(value)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, value):
        return _check_category(value)

    @field_validator("amount", mode="before")
    @classmethod
    def validate_amount(cls, value):
        return _check_amount(value)

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, value):
        return _check_description(value)

    @field_validator("date", mode="before")
    @classmethod
    def validate_date(cls, value):
        if value is None:
            raise ValueError("Invalid date format")
        return _check_date(value)

    def changes(self) -> Dict[str, Any]:
        """Return only the fields the client actually sent"""
        return self.model_dump(exclude_unset=True)


class TransactionListQuery(BaseModel):
    """DTO for the filter/sort query string of GET /transactions"""
    model_config = ConfigDict(populate_by_name=True)

    type: Optional[TransactionType] = None
    category: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    sort_by: str = Field(default="date", alias="sortBy")
    order: Literal["asc", "desc"] = "desc"

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value):
        if value is None or value == "":
            return None
        return _check_type(value)

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, value):
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, value):
        if value is None or value == "":
            return None
        _check_date(value)
        return value

    @field_validator("sort_by", mode="before")
    @classmethod
    def validate_sort_by(cls, value):
        if value is None or value == "":
            return "date"
        if value not in SORTABLE_FIELDS:
            raise ValueError(f"Invalid sort field. Allowed: {', '.join(SORTABLE_FIELDS)}")
        return value

    @field_validator("order", mode="before")
    @classmethod
    def validate_order(cls, value):
        if value is None or value == "":
            return "desc"
        if value not in ("asc", "desc"):
            raise ValueError('Order must be "asc" or "desc"')
        return value

    def to_query(self) -> TransactionQuery:
        """
        Convert to the domain query.

        A date-only endDate covers that whole day, so both ends of the range
        are inclusive at day granularity.
        """
        date_from = parse_datetime(self.start_date) if self.start_date else None
        date_to = None
        if self.end_date:
            date_to = parse_datetime(self.end_date)
            if is_date_only(self.end_date):
                date_to = end_of_day(date_to)

        return TransactionQuery(
            type=self.type,
            category=self.category,
            date_from=date_from,
            date_to=date_to,
            sort_field=self.sort_by,
            sort_direction=SortDirection(self.order),
        )


class TransactionResponse(BaseModel):
    """DTO for transaction response"""
    id: str
    user: str
    type: TransactionType
    category: str
    amount: float
    description: str
    date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id or "",
            user=transaction.owner_id,
            type=transaction.type,
            category=transaction.category,
            amount=transaction.amount,
            description=transaction.description,
            date=transaction.date,
            created_at=transaction.created_at,
            updated_at=transaction.updated_at,
        )


class DeleteTransactionResponse(BaseModel):
    """DTO for transaction deletion confirmation"""
    message: str = "Transaction deleted successfully"
    id: str


class MonthlyTotals(BaseModel):
    month: str  # YYYY-MM
    income: float = 0.0
    expense: float = 0.0


class CategoryTotal(BaseModel):
    category: str
    total: float


class TransactionSummaryResponse(BaseModel):
    """DTO for the dashboard summary of a user's transactions"""
    total_income: float
    total_expense: float
    balance: float
    transaction_count: int
    monthly: List[MonthlyTotals]
    expense_by_category: List[CategoryTotal]
