# Standard library imports
from typing import List

# Local application imports
from ....domain.repositories.transaction_repository import TransactionRepository
from ....domain.models.transaction_query import TransactionQuery
from ...dto.transaction_dto import TransactionResponse


class ListTransactionsUseCase:
    """Use case for listing a user's transactions with filters and sorting"""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    async def execute(self, owner_id: str, query: TransactionQuery) -> List[TransactionResponse]:
        """
        List transactions owned by a user

        Args:
            owner_id: ID of the authenticated user
            query: Filters and sort order

        Returns:
            List of TransactionResponse objects in the requested order
        """
        transactions = await self.transaction_repository.find_by_owner(owner_id, query)
        return [TransactionResponse.from_domain(transaction) for transaction in transactions]
