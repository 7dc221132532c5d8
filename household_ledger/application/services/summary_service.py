"""Summary service - global totals."""

import structlog

from household_ledger.application.dto import SummaryResponse
from household_ledger.core.metrics import track_summary_latency
from household_ledger.domain.interfaces import TransactionRepository
from household_ledger.service.aggregation import global_totals

logger = structlog.get_logger(__name__)


class SummaryService:
    """Application service for household-wide totals."""

    def __init__(self, transaction_repository: TransactionRepository):
        self._transaction_repo = transaction_repository

    async def get_global_summary(self) -> SummaryResponse:
        """Income, expense and balance across every person, computed fresh."""
        transactions = await self._transaction_repo.list_all()

        with track_summary_latency("global"):
            totals = global_totals(transactions)

        logger.info(
            "summary_computed",
            transaction_count=totals.transaction_count,
            balance=str(totals.balance),
        )

        return SummaryResponse.from_totals(totals)
