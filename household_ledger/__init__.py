"""
Household Ledger - Income/Expense Tracking Engine

Domain rules for people, categories and transactions of a household,
plus the aggregation engine that derives income, expense and balance totals.
"""

__version__ = "0.1.0"
