from .create_transaction import CreateTransactionUseCase
from .list_transactions import ListTransactionsUseCase
from .get_transaction import GetTransactionUseCase
from .update_transaction import UpdateTransactionUseCase
from .delete_transaction import DeleteTransactionUseCase
from .get_transaction_summary import GetTransactionSummaryUseCase

__all__ = [
    "CreateTransactionUseCase",
    "ListTransactionsUseCase",
    "GetTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
    "GetTransactionSummaryUseCase",
]
