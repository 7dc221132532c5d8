"""Category aggregate."""

from datetime import datetime
from typing import List, Optional, Tuple

from household_ledger.domain.enums import CategoryPurpose
from household_ledger.domain.events import CategoryCreated, DomainEvent, utc_now
from household_ledger.domain.exceptions import (
    InvalidCategoryException,
    InvalidValueObjectError,
)
from household_ledger.domain.specifications import (
    can_be_used_with_transaction_type,
    is_valid_purpose,
)
from household_ledger.domain.value_objects import CategoryDescription


class Category:
    """A label for transactions with a declared purpose (Expense, Income or Both)."""

    def __init__(
        self,
        id: int,
        description: CategoryDescription,
        purpose: CategoryPurpose,
        created_at: datetime,
        is_active: bool = True,
    ):
        self._id = id
        self._description = description
        self._purpose = purpose
        self._created_at = created_at
        self._is_active = is_active

    @classmethod
    def create(
        cls,
        description: str,
        purpose: CategoryPurpose,
        id: int = 0,
        created_at: Optional[datetime] = None,
    ) -> Tuple["Category", List[DomainEvent]]:
        """
        Create a category, or rebuild one from storage when ``id`` is set.

        Returns:
            The category and the events it produced. A new category
            (``id == 0``) produces one CategoryCreated; a rebuilt one none.

        Raises:
            InvalidCategoryException: If the description or purpose is invalid
        """
        try:
            category_description = CategoryDescription.create(description)
        except InvalidValueObjectError as e:
            raise InvalidCategoryException(e.message) from e

        if not is_valid_purpose(purpose):
            raise InvalidCategoryException("invalid category purpose")

        category = cls(
            id=id if id > 0 else 0,
            description=category_description,
            purpose=purpose,
            created_at=created_at or utc_now(),
            is_active=True,
        )

        events: List[DomainEvent] = []
        if id == 0:
            events.append(
                CategoryCreated(
                    category_id=category.id,
                    description=category_description.value,
                    purpose=purpose.value,
                )
            )

        return category, events

    @property
    def id(self) -> int:
        return self._id

    @property
    def description(self) -> CategoryDescription:
        return self._description

    @property
    def purpose(self) -> CategoryPurpose:
        return self._purpose

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_active(self) -> bool:
        return self._is_active

    def update_description(self, new_description: str) -> None:
        if not self._is_active:
            raise InvalidCategoryException("cannot update an inactive category")
        try:
            self._description = CategoryDescription.create(new_description)
        except InvalidValueObjectError as e:
            raise InvalidCategoryException(e.message) from e

    def deactivate(self) -> None:
        if not self._is_active:
            raise InvalidCategoryException("category is already inactive")
        self._is_active = False

    def can_be_used_with(self, transaction_type) -> bool:
        return can_be_used_with_transaction_type(self._purpose, transaction_type)

    def __repr__(self) -> str:
        return (
            f"Category(id={self._id}, description={self._description.value!r}, "
            f"purpose={self._purpose.value}, is_active={self._is_active})"
        )
