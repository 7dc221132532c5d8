"""
Storage rows.

Plain rows as a persistence layer would hold them: enums are stored by
value and amounts as Decimal, never as domain objects.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass
class PersonRecord:
    id: int
    name: str
    age: int
    created_at: datetime


@dataclass
class CategoryRecord:
    id: int
    description: str
    purpose: str
    created_at: datetime


@dataclass
class TransactionRecord:
    id: int
    description: str
    value: Decimal
    currency: str
    type: str
    category_id: int
    person_id: int
    created_at: datetime
    is_active: bool = True
