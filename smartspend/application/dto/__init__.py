from .auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from .user_dto import UserResponse, CurrentUserResponse
from .transaction_dto import (
    TransactionCreateRequest,
    TransactionUpdateRequest,
    TransactionListQuery,
    TransactionResponse,
    DeleteTransactionResponse,
    TransactionSummaryResponse,
    MonthlyTotals,
    CategoryTotal,
)

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "AuthResponse",
    "UserResponse",
    "CurrentUserResponse",
    "TransactionCreateRequest",
    "TransactionUpdateRequest",
    "TransactionListQuery",
    "TransactionResponse",
    "DeleteTransactionResponse",
    "TransactionSummaryResponse",
    "MonthlyTotals",
    "CategoryTotal",
]
