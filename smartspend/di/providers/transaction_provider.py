from typing import TYPE_CHECKING
from ...domain.repositories.transaction_repository import TransactionRepository
from ...application.use_cases.transaction import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionSummaryUseCase,
    GetTransactionUseCase,
    ListTransactionsUseCase,
    UpdateTransactionUseCase,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class TransactionProvider:
    """Transaction use case provider - registers all transaction-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all transaction use cases.
        Use cases are created on-demand via factories.
        """
        for use_case_class in (
            ListTransactionsUseCase,
            GetTransactionUseCase,
            CreateTransactionUseCase,
            UpdateTransactionUseCase,
            DeleteTransactionUseCase,
            GetTransactionSummaryUseCase,
        ):
            container.register_factory(
                use_case_class,
                lambda cls=use_case_class: cls(
                    transaction_repository=container.get(TransactionRepository)
                )
            )
