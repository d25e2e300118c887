# Standard library imports
import logging

# Local application imports
from ....domain.repositories.transaction_repository import TransactionRepository
from ....domain.models.transaction import Transaction
from ....utils.datetime_utils import utc_now
from ...dto.transaction_dto import TransactionCreateRequest, TransactionResponse

logger = logging.getLogger(__name__)


class CreateTransactionUseCase:
    """Use case for recording a new income or expense"""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    async def execute(
        self,
        request: TransactionCreateRequest,
        owner_id: str,
    ) -> TransactionResponse:
        """
        Create a new transaction owned by the requester

        Args:
            request: Validated transaction payload
            owner_id: ID of the authenticated user

        Returns:
            TransactionResponse with the stored transaction
        """
        now = utc_now()
        new_transaction = Transaction(
            id=None,  # Will be set by repository
            owner_id=owner_id,
            type=request.type,
            category=request.category,
            amount=request.amount,
            description=request.description or "",
            date=request.date or now,
            created_at=now,
            updated_at=now,
        )

        saved = await self.transaction_repository.create(new_transaction)
        logger.info(f"User {owner_id} created transaction {saved.id}")
        return TransactionResponse.from_domain(saved)
