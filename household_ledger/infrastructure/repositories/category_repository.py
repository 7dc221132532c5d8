"""In-memory repository implementation for categories."""

from typing import List, Optional

from household_ledger.domain.aggregates import Category, CategoryPurpose
from household_ledger.domain.exceptions import InvalidCategoryException
from household_ledger.domain.interfaces import CategoryRepository

from .records import CategoryRecord
from .store import InMemoryStore


class InMemoryCategoryRepository(CategoryRepository):
    """Category repository backed by an InMemoryStore."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    async def save(self, category: Category) -> Category:
        category_id = category.id or self._store.next_category_id()
        record = CategoryRecord(
            id=category_id,
            description=category.description.value,
            purpose=category.purpose.value,
            created_at=category.created_at,
        )
        self._store.categories[category_id] = record
        return self._to_entity(record)

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        record = self._store.categories.get(category_id)
        if record is None:
            return None
        return self._to_entity(record)

    async def exists_with_description(self, description: str) -> bool:
        wanted = description.strip().lower()
        return any(
            record.description.lower() == wanted
            for record in self._store.categories.values()
        )

    async def list_all(self) -> List[Category]:
        records = sorted(self._store.categories.values(), key=lambda r: r.description)
        return [self._to_entity(record) for record in records]

    async def delete(self, category_id: int) -> bool:
        if category_id not in self._store.categories:
            return False

        in_use = any(
            txn.category_id == category_id for txn in self._store.transactions.values()
        )
        if in_use:
            raise InvalidCategoryException(
                "category still has transactions and cannot be deleted"
            )

        del self._store.categories[category_id]
        return True

    def _to_entity(self, record: CategoryRecord) -> Category:
        category, _ = Category.create(
            description=record.description,
            purpose=CategoryPurpose(record.purpose),
            id=record.id,
            created_at=record.created_at,
        )
        return category
