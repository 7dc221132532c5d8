"""In-memory repository implementation for transactions."""

from typing import List, Optional

from household_ledger.domain.aggregates import Transaction, TransactionType
from household_ledger.domain.interfaces import TransactionRepository

from .records import TransactionRecord
from .store import InMemoryStore


class InMemoryTransactionRepository(TransactionRepository):
    """Transaction repository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def save(self, transaction: Transaction) -> Transaction:
        transaction_id = transaction.id or self._store.next_transaction_id()
        record = TransactionRecord(
            id=transaction_id,
            description=transaction.description,
            value=transaction.amount.amount,
            currency=transaction.amount.currency,
            type=transaction.type.value,
            category_id=transaction.category_id,
            person_id=transaction.person_id,
            created_at=transaction.created_at,
            is_active=transaction.is_active,
        )
        self._store.transactions[transaction_id] = record
        return self._to_entity(record)

    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        record = self._store.transactions.get(transaction_id)
        if record is None:
            return None
        return self._to_entity(record)

    async def list_all(self) -> List[Transaction]:
        return self._newest_first(self._store.transactions.values())

    async def list_by_person(self, person_id: int) -> List[Transaction]:
        return self._newest_first(
            r for r in self._store.transactions.values() if r.person_id == person_id
        )

    async def list_by_category(self, category_id: int) -> List[Transaction]:
        return self._newest_first(
            r for r in self._store.transactions.values() if r.category_id == category_id
        )

    def _newest_first(self, records) -> List[Transaction]:
        ordered = sorted(records, key=lambda r: (r.created_at, r.id), reverse=True)
        return [self._to_entity(record) for record in ordered]

    def _to_entity(self, record: TransactionRecord) -> Transaction:
        return Transaction.restore(
            id=record.id,
            amount=record.value,
            description=record.description,
            type=TransactionType(record.type),
            category_id=record.category_id,
            person_id=record.person_id,
            created_at=record.created_at,
            is_active=record.is_active,
            currency=record.currency,
        )
