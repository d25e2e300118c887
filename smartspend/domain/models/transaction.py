# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError


class TransactionType(str, Enum):
    """Direction of money flow"""
    INCOME = "income"
    EXPENSE = "expense"


@dataclass
class Transaction:
    """
    Pure domain model for Transaction entity - no external dependencies.

    A transaction belongs to exactly one user. owner_id is set once on
    creation and is never taken from client input.
    """
    id: Optional[str]
    owner_id: str
    type: TransactionType
    category: str
    amount: float
    date: datetime
    description: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.owner_id:
            raise ValidationError("Owner user ID is required", field="user")

        try:
            self.type = TransactionType(self.type)
        except ValueError:
            raise ValidationError('Type must be "income" or "expense"', field="type")

        self.category = (self.category or "").strip()
        if not self.category:
            raise ValidationError("Category is required", field="category")

        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValidationError("Amount must be greater than 0", field="amount")
        self.amount = float(self.amount)
        if not self.amount > 0:
            raise ValidationError("Amount must be greater than 0", field="amount")

        if not isinstance(self.date, datetime):
            raise ValidationError("Invalid date format", field="date")

        self.description = (self.description or "").strip()
