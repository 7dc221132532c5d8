"""Data transfer objects for summary operations."""

from dataclasses import dataclass
from decimal import Decimal

from household_ledger.service.aggregation import Totals


@dataclass(frozen=True)
class SummaryResponse:
    """Totals across every person."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal

    @classmethod
    def from_totals(cls, totals: Totals) -> "SummaryResponse":
        return cls(
            total_income=totals.total_income,
            total_expense=totals.total_expense,
            balance=totals.balance,
        )
