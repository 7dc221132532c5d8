"""
Transaction aggregate.

A transaction is created only through ``Transaction.create``, which runs the
whole rule gate before anything is built, so an invalid transaction never
exists. After creation the only transition is ``cancel()``:

    (uncreated) --create--> active --cancel--> cancelled
"""

from datetime import datetime
from typing import List, Optional, Tuple

from household_ledger.domain.enums import TransactionType
from household_ledger.domain.events import DomainEvent, TransactionCreated, utc_now
from household_ledger.domain.exceptions import (
    InvalidTransactionException,
    InvalidValueObjectError,
)
from household_ledger.domain.specifications import enforce_transaction_rules
from household_ledger.domain.value_objects import Money


class Transaction:
    """An income or expense entry for one person under one category."""

    def __init__(
        self,
        id: int,
        amount: Money,
        description: str,
        type: TransactionType,
        category_id: int,
        person_id: int,
        created_at: datetime,
        is_active: bool = True,
    ):
        self._id = id
        self._amount = amount
        self._description = description
        self._type = type
        self._category_id = category_id
        self._person_id = person_id
        self._created_at = created_at
        self._is_active = is_active

    @classmethod
    def create(
        cls,
        amount,
        description: str,
        type: TransactionType,
        category_id: int,
        person_id: int,
        is_person_minor: bool,
        category_supports_type: bool,
        id: int = 0,
        created_at: Optional[datetime] = None,
        currency: Optional[str] = None,
    ) -> Tuple["Transaction", List[DomainEvent]]:
        """
        Create a transaction after checking every business rule.

        Args:
            amount: Raw amount, must be > 0
            description: Free text, non-blank, at most 400 chars
            type: Expense or Income
            category_id: Category the transaction is filed under
            person_id: Person the transaction belongs to
            is_person_minor: Whether the person is under 18
            category_supports_type: Whether the category purpose accepts ``type``
            id: 0 for a new transaction
            created_at: Creation time; defaults to now (UTC)
            currency: Defaults to the configured currency

        Returns:
            The transaction and its events (one TransactionCreated when ``id == 0``)

        Raises:
            InvalidTransactionException: On the first violated rule; nothing
                is built and no event is produced
        """
        enforce_transaction_rules(
            amount=amount,
            transaction_type=type,
            is_person_minor=is_person_minor,
            category_supports_type=category_supports_type,
            description=description,
        )

        money = cls._build_money(amount, currency)
        transaction = cls(
            id=id if id > 0 else 0,
            amount=money,
            description=description.strip(),
            type=type,
            category_id=category_id,
            person_id=person_id,
            created_at=created_at or utc_now(),
            is_active=True,
        )

        events: List[DomainEvent] = []
        if id == 0:
            events.append(
                TransactionCreated(
                    transaction_id=transaction.id,
                    person_id=person_id,
                    category_id=category_id,
                    amount=money.amount,
                    currency=money.currency,
                    type=type.value,
                    description=transaction.description,
                )
            )

        return transaction, events

    @classmethod
    def restore(
        cls,
        id: int,
        amount,
        description: str,
        type: TransactionType,
        category_id: int,
        person_id: int,
        created_at: datetime,
        is_active: bool = True,
        currency: Optional[str] = None,
    ) -> "Transaction":
        """
        Rebuild a stored transaction.

        Only the scalar rules are re-checked. The person and category rules
        were enforced when the transaction was created and are not re-applied
        against today's state (a minor who has since turned 18, a category
        whose purpose changed). Never produces events.
        """
        enforce_transaction_rules(
            amount=amount,
            transaction_type=type,
            is_person_minor=False,
            category_supports_type=True,
            description=description,
        )
        return cls(
            id=id,
            amount=cls._build_money(amount, currency),
            description=description.strip(),
            type=type,
            category_id=category_id,
            person_id=person_id,
            created_at=created_at,
            is_active=is_active,
        )

    @staticmethod
    def _build_money(amount, currency: Optional[str]) -> Money:
        try:
            return Money.create(amount, currency)
        except InvalidValueObjectError as e:
            raise InvalidTransactionException(e.message, reason=e.field) from e

    @property
    def id(self) -> int:
        return self._id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def description(self) -> str:
        return self._description

    @property
    def type(self) -> TransactionType:
        return self._type

    @property
    def category_id(self) -> int:
        return self._category_id

    @property
    def person_id(self) -> int:
        return self._person_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_expense(self) -> bool:
        return self._type is TransactionType.EXPENSE

    @property
    def is_income(self) -> bool:
        return self._type is TransactionType.INCOME

    def cancel(self) -> None:
        """Cancel the transaction. Cancelled transactions stay cancelled."""
        if not self._is_active:
            raise InvalidTransactionException(
                "transaction is already cancelled", reason="already_cancelled"
            )
        self._is_active = False

    def __repr__(self) -> str:
        return (
            f"Transaction(id={self._id}, amount={self._amount}, "
            f"type={self._type.value}, person_id={self._person_id}, "
            f"category_id={self._category_id}, is_active={self._is_active})"
        )
