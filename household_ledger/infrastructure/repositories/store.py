"""In-memory table store shared by the in-memory repositories."""

import itertools
from dataclasses import dataclass, field
from typing import Dict, Iterator

from .records import CategoryRecord, PersonRecord, TransactionRecord


@dataclass
class InMemoryStore:
    """
    Three tables with identity sequences.

    Repositories built on the same store see each other's rows, which is
    what lets person deletion cascade and category deletion be restricted.
    """

    people: Dict[int, PersonRecord] = field(default_factory=dict)
    categories: Dict[int, CategoryRecord] = field(default_factory=dict)
    transactions: Dict[int, TransactionRecord] = field(default_factory=dict)
    _person_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))
    _category_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))
    _transaction_ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))

    def next_person_id(self) -> int:
        return next(self._person_ids)

    def next_category_id(self) -> int:
        return next(self._category_ids)

    def next_transaction_id(self) -> int:
        return next(self._transaction_ids)
