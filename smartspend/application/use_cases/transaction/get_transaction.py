# Local application imports
from ....domain.repositories.transaction_repository import TransactionRepository
from ....core.exceptions import NotFoundError
from ...dto.transaction_dto import TransactionResponse


class GetTransactionUseCase:
    """Use case for getting a single transaction by ID"""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    async def execute(self, transaction_id: str, owner_id: str) -> TransactionResponse:
        """
        Raises:
            NotFoundError: If the transaction does not exist or belongs to someone else
        """
        transaction = await self.transaction_repository.find_by_id_for_owner(transaction_id, owner_id)
        if transaction is None:
            raise NotFoundError(
                f"Transaction {transaction_id} not found for user {owner_id}",
                user_message="Transaction not found",
            )
        return TransactionResponse.from_domain(transaction)
