# Standard library imports
from collections import defaultdict
from typing import Dict, Iterable

# Local application imports
from ....domain.repositories.transaction_repository import TransactionRepository
from ....domain.models.transaction import Transaction, TransactionType
from ....domain.models.transaction_query import TransactionQuery
from ...dto.transaction_dto import (
    CategoryTotal,
    MonthlyTotals,
    TransactionSummaryResponse,
)


def summarize(transactions: Iterable[Transaction]) -> TransactionSummaryResponse:
    """
    Aggregate totals for dashboard cards and charts.

    Months are UTC calendar months ("YYYY-MM") in ascending order; expense
    categories are ordered by total, largest first.
    """
    total_income = 0.0
    total_expense = 0.0
    count = 0
    monthly: Dict[str, MonthlyTotals] = {}
    by_category: Dict[str, float] = defaultdict(float)

    for transaction in transactions:
        count += 1
        month_key = transaction.date.strftime("%Y-%m")
        bucket = monthly.setdefault(month_key, MonthlyTotals(month=month_key))
        if transaction.type == TransactionType.INCOME:
            total_income += transaction.amount
            bucket.income += transaction.amount
        else:
            total_expense += transaction.amount
            bucket.expense += transaction.amount
            by_category[transaction.category] += transaction.amount

    return TransactionSummaryResponse(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        transaction_count=count,
        monthly=[monthly[key] for key in sorted(monthly)],
        expense_by_category=[
            CategoryTotal(category=category, total=total)
            for category, total in sorted(by_category.items(), key=lambda item: (-item[1], item[0]))
        ],
    )


class GetTransactionSummaryUseCase:
    """Use case for summarizing a user's (optionally filtered) transactions"""

    def __init__(self, transaction_repository: TransactionRepository) -> None:
        self.transaction_repository = transaction_repository

    async def execute(self, owner_id: str, query: TransactionQuery) -> TransactionSummaryResponse:
        transactions = await self.transaction_repository.find_by_owner(owner_id, query)
        return summarize(transactions)
