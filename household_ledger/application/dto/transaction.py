"""Data transfer objects for transaction operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from household_ledger.domain.aggregates import TransactionType
from household_ledger.domain.exceptions import InvalidTransactionException
from household_ledger.domain.specifications import REASON_TYPE


@dataclass(frozen=True)
class TransactionRequest:
    """
    Input data for registering a transaction.

    ``type`` may be the enum, "Expense"/"Income" or the numeric code
    (0 = Expense, 1 = Income).
    """

    amount: Union[Decimal, int, float, str]
    description: str
    type: Union[TransactionType, str, int]
    category_id: int
    person_id: int

    def to_transaction_type(self) -> TransactionType:
        try:
            return TransactionType.parse(self.type)
        except ValueError as e:
            raise InvalidTransactionException(
                "invalid transaction type", reason=REASON_TYPE
            ) from e


@dataclass(frozen=True)
class TransactionResponse:
    id: int
    amount: Decimal
    currency: str
    description: str
    type: str
    category_id: int
    person_id: int
    created_at: str
    is_active: bool

    @classmethod
    def from_entity(cls, transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            amount=transaction.amount.amount,
            currency=transaction.amount.currency,
            description=transaction.description,
            type=transaction.type.value,
            category_id=transaction.category_id,
            person_id=transaction.person_id,
            created_at=transaction.created_at.isoformat(),
            is_active=transaction.is_active,
        )
