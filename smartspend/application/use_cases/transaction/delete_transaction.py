# Standard library imports
import logging

# Local application imports
from ....domain.repositories.transaction_repository import TransactionRepository
from ....core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeleteTransactionUseCase:
    """Use case for permanently deleting a transaction"""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    async def execute(self, transaction_id: str, owner_id: str) -> None:
        """
        Raises:
            NotFoundError: If the transaction does not exist or belongs to someone else
        """
        deleted = await self.transaction_repository.delete_for_owner(transaction_id, owner_id)
        if not deleted:
            raise NotFoundError(
                f"Transaction {transaction_id} not found for user {owner_id}",
                user_message="Transaction not found",
            )
        logger.info(f"User {owner_id} deleted transaction {transaction_id}")
