# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

# Local application imports
from ...core.exceptions import ValidationError
from .transaction import TransactionType


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Client-facing sort keys; anything else is rejected
SORTABLE_FIELDS = ("date", "amount", "category", "type", "createdAt")


@dataclass(frozen=True)
class TransactionQuery:
    """
    Filter and sort options for listing a user's transactions.

    Ownership is deliberately not part of the query: the repository always
    scopes by the requester, whatever the filters say.
    """
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None
    sort_field: str = "date"
    sort_direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        if self.sort_field not in SORTABLE_FIELDS:
            raise ValidationError(
                f"Invalid sort field. Allowed: {', '.join(SORTABLE_FIELDS)}",
                field="sortBy",
            )
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValidationError("startDate must not be after endDate", field="startDate")
