"""Person aggregate."""

from datetime import datetime
from typing import Iterable, Optional, Tuple

from household_ledger.domain.events import utc_now
from household_ledger.domain.exceptions import (
    InvalidPersonException,
    InvalidValueObjectError,
)
from household_ledger.domain.value_objects import Age, PersonName


class Person:
    """
    A member of the household.

    Transactions are referenced by id only; the person does not own
    transaction instances. An inactive person cannot be changed.
    """

    def __init__(
        self,
        id: int,
        name: PersonName,
        age: Age,
        created_at: datetime,
        is_active: bool = True,
        transaction_ids: Iterable[int] = (),
    ):
        self._id = id
        self._name = name
        self._age = age
        self._created_at = created_at
        self._is_active = is_active
        self._transaction_ids: list[int] = list(dict.fromkeys(transaction_ids))

    @classmethod
    def create(
        cls,
        name: str,
        age: int,
        id: int = 0,
        created_at: Optional[datetime] = None,
    ) -> "Person":
        """
        Create a person, or rebuild one from storage when ``id`` is set.

        Raises:
            InvalidPersonException: If the name or age is invalid
        """
        try:
            person_name = PersonName.create(name)
            person_age = Age.create(age)
        except InvalidValueObjectError as e:
            raise InvalidPersonException(e.message) from e

        return cls(
            id=id if id > 0 else 0,
            name=person_name,
            age=person_age,
            created_at=created_at or utc_now(),
            is_active=True,
        )

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> PersonName:
        return self._name

    @property
    def age(self) -> Age:
        return self._age

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_minor(self) -> bool:
        return self._age.is_minor

    @property
    def transaction_ids(self) -> Tuple[int, ...]:
        return tuple(self._transaction_ids)

    @property
    def transaction_count(self) -> int:
        return len(self._transaction_ids)

    def update_name(self, new_name: str) -> None:
        self._ensure_active("cannot update an inactive person")
        try:
            self._name = PersonName.create(new_name)
        except InvalidValueObjectError as e:
            raise InvalidPersonException(e.message) from e

    def update_age(self, new_age: int) -> None:
        self._ensure_active("cannot update an inactive person")
        try:
            self._age = Age.create(new_age)
        except InvalidValueObjectError as e:
            raise InvalidPersonException(e.message) from e

    def add_transaction(self, transaction_id: int) -> None:
        """Link a transaction id to this person; linking twice is a no-op."""
        self._ensure_active("cannot add transactions to an inactive person")
        if transaction_id not in self._transaction_ids:
            self._transaction_ids.append(transaction_id)

    def deactivate(self) -> None:
        """Deactivate the person. There is no way back."""
        self._ensure_active("person is already inactive")
        self._is_active = False

    def _ensure_active(self, message: str) -> None:
        if not self._is_active:
            raise InvalidPersonException(message)

    def __repr__(self) -> str:
        return (
            f"Person(id={self._id}, name={self._name.value!r}, "
            f"age={self._age.value}, is_active={self._is_active})"
        )
