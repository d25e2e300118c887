"""
Translate a TransactionQuery into a MongoDB filter and sort specification.

Kept free of I/O so the ownership and range rules can be tested directly.
"""
# Standard library imports
from typing import Any, Dict, List, Tuple

# External package imports
from bson import ObjectId
from pymongo import ASCENDING, DESCENDING

# Local application imports
from ...domain.constants import TransactionFields
from ...domain.models.transaction_query import SortDirection, TransactionQuery


def build_transaction_filter(owner_id: ObjectId, query: TransactionQuery) -> Dict[str, Any]:
    """
    Build the find() filter for a user's transactions.

    Date bounds are inclusive on both ends. The owner clause is assigned
    last, so no filter value can widen the result to other users' records.
    """
    mongo_filter: Dict[str, Any] = {}

    if query.type is not None:
        mongo_filter[TransactionFields.TYPE] = query.type.value
    if query.category:
        mongo_filter[TransactionFields.CATEGORY] = query.category

    if query.date_from is not None or query.date_to is not None:
        date_range: Dict[str, Any] = {}
        if query.date_from is not None:
            date_range["$gte"] = query.date_from
        if query.date_to is not None:
            date_range["$lte"] = query.date_to
        mongo_filter[TransactionFields.DATE] = date_range

    mongo_filter[TransactionFields.USER] = owner_id
    return mongo_filter


def build_transaction_sort(query: TransactionQuery) -> List[Tuple[str, int]]:
    """Single-key sort specification for find().sort()"""
    direction = ASCENDING if query.sort_direction == SortDirection.ASC else DESCENDING
    return [(query.sort_field, direction)]
