# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from ...application.dto.transaction_dto import (
    DeleteTransactionResponse,
    TransactionCreateRequest,
    TransactionListQuery,
    TransactionResponse,
    TransactionSummaryResponse,
    TransactionUpdateRequest,
)
from ...application.use_cases.transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionSummaryUseCase,
    GetTransactionUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
)
from ...core.exceptions import ValidationError
from ...domain.models.transaction_query import TransactionQuery
from ...di.container import get_container
from ..error_handlers import first_error_message
from .dependencies import CurrentIdentity, get_current_identity


# Every route here requires a valid bearer token
router = APIRouter(tags=["transactions"], dependencies=[Depends(get_current_identity)])


def get_transaction_query(
    transaction_type: Optional[str] = Query(None, alias="type"),
    category: Optional[str] = Query(None),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    order: Optional[str] = Query(None),
) -> TransactionQuery:
    """
    FastAPI dependency turning the list query string into a TransactionQuery

    Raises:
        ValidationError: On an unknown type, sort field or order, or a malformed date
    """
    try:
        params = TransactionListQuery(
            type=transaction_type,
            category=category,
            startDate=start_date,
            endDate=end_date,
            sortBy=sort_by,
            order=order,
        )
    except PydanticValidationError as exception:
        raise ValidationError(first_error_message(exception.errors()))
    return params.to_query()


@router.get("", response_model=List[TransactionResponse])
async def list_transactions(
    query: TransactionQuery = Depends(get_transaction_query),
    identity: CurrentIdentity = Depends(get_current_identity),
) -> List[TransactionResponse]:
    """
    List the current user's transactions

    Query params:
        type: "income" or "expense"
        category: exact category name
        startDate / endDate: ISO dates, both inclusive
        sortBy: date, amount, category, type or createdAt (default: date)
        order: "asc" or "desc" (default: desc)
    """
    container = get_container()
    list_use_case = container.get(ListTransactionsUseCase)
    return await list_use_case.execute(owner_id=identity.user_id, query=query)


@router.get("/summary", response_model=TransactionSummaryResponse)
async def get_transaction_summary(
    query: TransactionQuery = Depends(get_transaction_query),
    identity: CurrentIdentity = Depends(get_current_identity),
) -> TransactionSummaryResponse:
    """
    Totals, monthly income/expense and expense per category for the
    current user's transactions (same filters as the list)
    """
    container = get_container()
    summary_use_case = container.get(GetTransactionSummaryUseCase)
    return await summary_use_case.execute(owner_id=identity.user_id, query=query)


@router.get("/{transaction_id}", response_model=TransactionResponse)
async def get_transaction(
    transaction_id: str,
    identity: CurrentIdentity = Depends(get_current_identity),
) -> TransactionResponse:
    """
    Get one of the current user's transactions by ID
    """
    container = get_container()
    get_use_case = container.get(GetTransactionUseCase)
    return await get_use_case.execute(transaction_id=transaction_id, owner_id=identity.user_id)


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    request: TransactionCreateRequest,
    identity: CurrentIdentity = Depends(get_current_identity),
) -> TransactionResponse:
    """
    Create a new transaction

    Args:
        request: Transaction creation request
        identity: Current authenticated identity (from dependency)

    Returns:
        TransactionResponse with created transaction
    """
    container = get_container()
    create_use_case = container.get(CreateTransactionUseCase)
    return await create_use_case.execute(request=request, owner_id=identity.user_id)


@router.put("/{transaction_id}", response_model=TransactionResponse)
async def update_transaction(
    transaction_id: str,
    request: TransactionUpdateRequest,
    identity: CurrentIdentity = Depends(get_current_identity),
) -> TransactionResponse:
    """
    Update any subset of a transaction's type, category, amount,
    description and date
    """
    container = get_container()
    update_use_case = container.get(UpdateTransactionUseCase)
    return await update_use_case.execute(
        transaction_id=transaction_id,
        request=request,
        owner_id=identity.user_id,
    )


@router.delete("/{transaction_id}", response_model=DeleteTransactionResponse)
async def delete_transaction(
    transaction_id: str,
    identity: CurrentIdentity = Depends(get_current_identity),
) -> DeleteTransactionResponse:
    """
    Permanently delete a transaction
    """
    container = get_container()
    delete_use_case = container.get(DeleteTransactionUseCase)
    await delete_use_case.execute(transaction_id=transaction_id, owner_id=identity.user_id)
    return DeleteTransactionResponse(id=transaction_id)
