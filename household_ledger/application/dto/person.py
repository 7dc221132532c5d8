"""Data transfer objects for person operations."""

from dataclasses import dataclass
from decimal import Decimal

from household_ledger.service.aggregation import Totals


@dataclass(frozen=True)
class PersonRequest:
    """Input data for creating or updating a person."""

    name: str
    age: int


@dataclass(frozen=True)
class PersonResponse:
    """A person with their totals."""

    id: int
    name: str
    age: int
    is_minor: bool
    transaction_count: int
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal

    @classmethod
    def from_entity(cls, person, totals: Totals) -> "PersonResponse":
        return cls(
            id=person.id,
            name=person.name.value,
            age=person.age.value,
            is_minor=person.is_minor,
            transaction_count=person.transaction_count,
            total_income=totals.total_income,
            total_expense=totals.total_expense,
            balance=totals.balance,
        )
