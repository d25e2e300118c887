# Standard library imports
import dataclasses
import logging

# Local application imports
from ....domain.repositories.transaction_repository import TransactionRepository
from ....core.exceptions import NotFoundError
from ...dto.transaction_dto import TransactionUpdateRequest, TransactionResponse

logger = logging.getLogger(__name__)


class UpdateTransactionUseCase:
    """Use case for partially updating a transaction"""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    def _not_found(self, transaction_id: str, owner_id: str) -> NotFoundError:
        return NotFoundError(
            f"Transaction {transaction_id} not found for user {owner_id}",
            user_message="Transaction not found",
        )

    async def execute(
        self,
        transaction_id: str,
        request: TransactionUpdateRequest,
        owner_id: str,
    ) -> TransactionResponse:
        """
        Apply the fields present in the request; everything else keeps its value

        Args:
            transaction_id: ID of the transaction to update
            request: Partial payload
            owner_id: ID of the authenticated user

        Returns:
            TransactionResponse with the updated transaction

        Raises:
            NotFoundError: If the transaction does not exist or belongs to someone else
            ValidationError: If the merged record breaks a business rule
        """
        existing = await self.transaction_repository.find_by_id_for_owner(transaction_id, owner_id)
        if existing is None:
            raise self._not_found(transaction_id, owner_id)

        changes = request.changes()
        if not changes:
            return TransactionResponse.from_domain(existing)

        # Re-run domain validation on the merged record before writing
        merged = dataclasses.replace(existing, **changes)
        validated_changes = {field: getattr(merged, field) for field in changes}

        updated = await self.transaction_repository.update_for_owner(
            transaction_id, owner_id, validated_changes
        )
        if updated is None:
            # Deleted between the read and the write
            raise self._not_found(transaction_id, owner_id)

        logger.info(f"User {owner_id} updated transaction {transaction_id}: {sorted(changes)}")
        return TransactionResponse.from_domain(updated)
