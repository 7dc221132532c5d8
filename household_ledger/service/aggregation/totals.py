"""
Totals aggregation over transaction snapshots.

Every function here is a pure reduction over the collection it is given:
nothing is cached and nothing is mutated, so totals are recomputed on each
read and always agree with the transactions they came from.

Rules:
- Only active transactions count; cancelled ones are skipped.
- total_income sums Income amounts, total_expense sums Expense amounts.
- balance = total_income - total_expense.
- Order does not matter and duplicates are not collapsed: every active
  transaction in the input counts exactly once.
- All counted amounts must share one currency.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from household_ledger.domain.aggregates import Transaction
from household_ledger.domain.exceptions import CurrencyMismatchError

from .models import Totals


def calculate_totals(transactions: Iterable[Transaction]) -> Totals:
    """
    Reduce a collection of transactions to its totals.

    Args:
        transactions: Any iterable of transactions (may be empty)

    Returns:
        Totals; all zero when no active transaction is present

    Raises:
        CurrencyMismatchError: If active transactions use different currencies
    """
    total_income = Decimal("0")
    total_expense = Decimal("0")
    currency: Optional[str] = None
    count = 0

    for transaction in transactions:
        if not transaction.is_active:
            continue

        amount = transaction.amount
        if currency is None:
            currency = amount.currency
        elif amount.currency != currency:
            raise CurrencyMismatchError(currency, amount.currency)

        if transaction.is_income:
            total_income += amount.amount
        elif transaction.is_expense:
            total_expense += amount.amount
        count += 1

    return Totals(
        total_income=total_income,
        total_expense=total_expense,
        balance=total_income - total_expense,
        currency=currency,
        transaction_count=count,
    )


def totals_for_person(transactions: Iterable[Transaction], person_id: int) -> Totals:
    return calculate_totals(t for t in transactions if t.person_id == person_id)


def totals_for_category(
    transactions: Iterable[Transaction], category_id: int
) -> Totals:
    return calculate_totals(t for t in transactions if t.category_id == category_id)


def totals_by_person(transactions: Iterable[Transaction]) -> Dict[int, Totals]:
    """
    Group transactions by person and total each group.

    Only people that appear in ``transactions`` get an entry; callers
    listing every person should default missing ids to ``Totals.zero()``.
    """
    return _totals_by(transactions, key=lambda t: t.person_id)


def totals_by_category(transactions: Iterable[Transaction]) -> Dict[int, Totals]:
    """Group transactions by category and total each group."""
    return _totals_by(transactions, key=lambda t: t.category_id)


def global_totals(transactions: Iterable[Transaction]) -> Totals:
    """Totals across every transaction of every person."""
    return calculate_totals(transactions)


def _totals_by(transactions: Iterable[Transaction], key) -> Dict[int, Totals]:
    groups: Dict[int, List[Transaction]] = defaultdict(list)
    for transaction in transactions:
        groups[key(transaction)].append(transaction)
    return {group_id: calculate_totals(group) for group_id, group in groups.items()}
