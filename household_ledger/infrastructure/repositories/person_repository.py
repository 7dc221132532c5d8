"""In-memory repository implementation for people."""

from typing import List, Optional

from household_ledger.domain.aggregates import Person
from household_ledger.domain.interfaces import PersonRepository

from .records import PersonRecord
from .store import InMemoryStore


class InMemoryPersonRepository(PersonRepository):
    """Person repository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def save(self, person: Person) -> Person:
        person_id = person.id or self._store.next_person_id()
        record = PersonRecord(
            id=person_id,
            name=person.name.value,
            age=person.age.value,
            created_at=person.created_at,
        )
        self._store.people[person_id] = record
        return self._to_entity(record)

    async def get_by_id(self, person_id: int) -> Optional[Person]:
        record = self._store.people.get(person_id)
        if record is None:
            return None
        return self._to_entity(record)

    async def get_by_name(self, name: str) -> Optional[Person]:
        for record in self._store.people.values():
            if record.name == name:
                return self._to_entity(record)
        return None

    async def list_all(self) -> List[Person]:
        return [self._to_entity(record) for record in self._store.people.values()]

    async def delete(self, person_id: int) -> bool:
        if self._store.people.pop(person_id, None) is None:
            return False

        orphaned = [
            txn_id
            for txn_id, txn in self._store.transactions.items()
            if txn.person_id == person_id
        ]
        for txn_id in orphaned:
            del self._store.transactions[txn_id]
        return True

    def _to_entity(self, record: PersonRecord) -> Person:
        return Person.create(
            name=record.name,
            age=record.age,
            id=record.id,
            created_at=record.created_at,
        )
