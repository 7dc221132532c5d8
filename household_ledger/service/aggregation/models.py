"""
Data models for the aggregation engine.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Totals:
    """
    Income, expense and balance derived from a set of transactions.

    Attributes:
        total_income: Sum of active Income amounts (>= 0)
        total_expense: Sum of active Expense amounts (>= 0)
        balance: total_income - total_expense, may be negative
        currency: Currency of the counted amounts, None when nothing was counted
        transaction_count: Number of active transactions counted
    """

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    currency: Optional[str] = None
    transaction_count: int = 0

    @classmethod
    def zero(cls) -> "Totals":
        return cls(
            total_income=Decimal("0"),
            total_expense=Decimal("0"),
            balance=Decimal("0"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_income": str(self.total_income),
            "total_expense": str(self.total_expense),
            "balance": str(self.balance),
            "currency": self.currency,
            "transaction_count": self.transaction_count,
        }
