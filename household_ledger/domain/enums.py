"""Closed enumerations shared by the aggregates and the specifications."""

from enum import Enum
from typing import Union


class _CodedEnum(str, Enum):
    """
    String enum that can also be read from its legacy integer code.

    The code is the member's declaration index, matching how the values
    were numbered in stored rows and client payloads.
    """

    @classmethod
    def parse(cls, raw: Union["_CodedEnum", str, int]):
        """
        Convert a boundary value (member, name, value or code) into a member.

        Raises:
            ValueError: If ``raw`` does not name a member
        """
        if isinstance(raw, cls):
            return raw

        members = list(cls)
        if isinstance(raw, int) and not isinstance(raw, bool):
            if 0 <= raw < len(members):
                return members[raw]
        elif isinstance(raw, str):
            text = raw.strip()
            if text.isdigit():
                return cls.parse(int(text))
            for member in members:
                if text.lower() in (member.value.lower(), member.name.lower()):
                    return member

        raise ValueError(f"{raw!r} is not a valid {cls.__name__}")

    @property
    def code(self) -> int:
        return list(type(self)).index(self)


class TransactionType(_CodedEnum):
    """Direction of a transaction."""

    EXPENSE = "Expense"  # Money out
    INCOME = "Income"  # Money in


class CategoryPurpose(_CodedEnum):
    """Which transaction types a category may be paired with."""

    EXPENSE = "Expense"
    INCOME = "Income"
    BOTH = "Both"
