"""Data transfer objects for category operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from household_ledger.domain.aggregates import CategoryPurpose
from household_ledger.domain.exceptions import InvalidCategoryException
from household_ledger.service.aggregation import Totals


@dataclass(frozen=True)
class CategoryRequest:
    """
    Input data for creating a category.

    ``purpose`` may be the enum, its name ("Expense", "Income", "Both")
    or the numeric code clients send (0, 1, 2).
    """

    description: str
    purpose: Union[CategoryPurpose, str, int]

    def to_purpose(self) -> CategoryPurpose:
        try:
            return CategoryPurpose.parse(self.purpose)
        except ValueError as e:
            raise InvalidCategoryException("invalid category purpose") from e


@dataclass(frozen=True)
class CategoryResponse:
    id: int
    description: str
    purpose: str

    @classmethod
    def from_entity(cls, category) -> "CategoryResponse":
        return cls(
            id=category.id,
            description=category.description.value,
            purpose=category.purpose.value,
        )


@dataclass(frozen=True)
class CategoryWithTotalsResponse:
    """A category with the totals of the transactions filed under it."""

    id: int
    description: str
    purpose: str
    total_income: Decimal
    total_expense: Decimal
    balance: Decimal

    @classmethod
    def from_entity(cls, category, totals: Totals) -> "CategoryWithTotalsResponse":
        return cls(
            id=category.id,
            description=category.description.value,
            purpose=category.purpose.value,
            total_income=totals.total_income,
            total_expense=totals.total_expense,
            balance=totals.balance,
        )
