"""
Money value object for transaction amounts.

Amounts are kept as ``Decimal`` and must be strictly positive: a ledger
entry records how much moved, the direction comes from the transaction type.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from household_ledger.core.config import settings
from household_ledger.domain.exceptions import (
    CurrencyMismatchError,
    InvalidValueObjectError,
)

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: object) -> Optional[Decimal]:
    """
    Read ``value`` as a finite Decimal.

    Floats go through ``str`` so that 0.1 becomes Decimal("0.1") rather than
    its binary expansion. Returns None for anything that is not a number.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            return None
    else:
        return None
    if not result.is_finite():
        return None
    return result


@dataclass(frozen=True)
class Money:
    """
    Positive monetary amount in a single currency.

    Attributes:
        amount: Decimal amount, always greater than zero
        currency: ISO-style currency code, upper-cased

    Build instances with :meth:`create`; arithmetic returns new instances.
    """

    amount: Decimal
    currency: str

    @classmethod
    def create(cls, amount: AmountLike, currency: Optional[str] = None) -> "Money":
        """
        Create a validated Money.

        Raises:
            InvalidValueObjectError: amount is not a number or is <= 0,
                or currency is blank
        """
        decimal_amount = to_decimal(amount)
        if decimal_amount is None:
            raise InvalidValueObjectError(
                f"invalid amount format: {amount!r}", field="amount"
            )
        if decimal_amount <= 0:
            raise InvalidValueObjectError(
                "amount must be greater than zero", field="amount"
            )

        if currency is None:
            currency = settings.default_currency
        if not isinstance(currency, str) or not currency.strip():
            raise InvalidValueObjectError("currency is required", field="currency")

        return cls(amount=decimal_amount, currency=currency.strip().upper())

    def add(self, other: "Money") -> "Money":
        self._ensure_same_currency(other)
        return Money.create(self.amount + other.amount, self.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract ``other``; the difference must itself be a valid amount."""
        self._ensure_same_currency(other)
        return Money.create(self.amount - other.amount, self.currency)

    def __add__(self, other: "Money") -> "Money":
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        return self.subtract(other)

    def _ensure_same_currency(self, other: "Money") -> None:
        if other.currency != self.currency:
            raise CurrencyMismatchError(self.currency, other.currency)

    def __str__(self) -> str:
        return f"{self.amount:,.2f} {self.currency}"
