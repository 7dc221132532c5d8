"""
Aggregation Engine - per-person, per-category and global totals.
"""

from .models import Totals
from .totals import (
    calculate_totals,
    global_totals,
    totals_by_category,
    totals_by_person,
    totals_for_category,
    totals_for_person,
)

__all__ = [
    # Models
    "Totals",
    # Reductions
    "calculate_totals",
    "totals_for_person",
    "totals_for_category",
    "totals_by_person",
    "totals_by_category",
    "global_totals",
]
