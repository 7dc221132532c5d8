"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional

from household_ledger.domain.aggregates import Category, Person, Transaction


class PersonRepository(ABC):
    """
    Abstract repository for Person persistence.

    Deleting a person removes the transactions that belong to them.
    """

    @abstractmethod
    async def save(self, person: Person) -> Person:
        """
        Persist a new or changed person.

        Returns:
            The stored person, with an id assigned when it was new
        """
        ...

    @abstractmethod
    async def get_by_id(self, person_id: int) -> Optional[Person]:
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Person]:
        """Exact-match lookup used to refuse duplicate names."""
        ...

    @abstractmethod
    async def list_all(self) -> List[Person]:
        ...

    @abstractmethod
    async def delete(self, person_id: int) -> bool:
        """
        Delete a person and cascade to their transactions.

        Returns:
            True if a person was removed
        """
        ...


class CategoryRepository(ABC):
    """
    Abstract repository for Category persistence.

    A category that still has transactions cannot be deleted.
    """

    @abstractmethod
    async def save(self, category: Category) -> Category:
        ...

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Optional[Category]:
        ...

    @abstractmethod
    async def exists_with_description(self, description: str) -> bool:
        """Case-insensitive lookup used to refuse duplicate descriptions."""
        ...

    @abstractmethod
    async def list_all(self) -> List[Category]:
        """
        Returns:
            Categories ordered by description
        """
        ...

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        """
        Delete a category.

        Raises:
            InvalidCategoryException: If transactions still reference it
        """
        ...


class TransactionRepository(ABC):
    """Abstract repository for Transaction persistence."""

    @abstractmethod
    async def save(self, transaction: Transaction) -> Transaction:
        ...

    @abstractmethod
    async def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        ...

    @abstractmethod
    async def list_all(self) -> List[Transaction]:
        """
        Returns:
            Every stored transaction, newest first
        """
        ...

    @abstractmethod
    async def list_by_person(self, person_id: int) -> List[Transaction]:
        ...

    @abstractmethod
    async def list_by_category(self, category_id: int) -> List[Transaction]:
        ...
