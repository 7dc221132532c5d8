"""Prometheus metrics for the household ledger.

Business Metrics:
- ledger_people_created_total: People registered
- ledger_categories_created_total: Categories registered, by purpose
- ledger_transactions_created_total: Transactions registered, by type
- ledger_transactions_rejected_total: Transactions refused, by rule
- ledger_transactions_cancelled_total: Transactions cancelled

Technical Metrics:
- ledger_summary_latency_seconds: Time spent computing totals
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from household_ledger.core.config import settings


# =============================================================================
# Business Metrics
# =============================================================================

people_created_total = Counter(
    "ledger_people_created_total",
    "Total number of people registered",
)

categories_created_total = Counter(
    "ledger_categories_created_total",
    "Total number of categories registered",
    ["purpose"],  # Expense, Income, Both
)

transactions_created_total = Counter(
    "ledger_transactions_created_total",
    "Total number of transactions registered",
    ["type"],  # Expense, Income
)

transactions_rejected_total = Counter(
    "ledger_transactions_rejected_total",
    "Total number of transactions refused by a business rule",
    ["reason"],  # amount, description, type, minor_income, category_mismatch, not_found
)

transactions_cancelled_total = Counter(
    "ledger_transactions_cancelled_total",
    "Total number of transactions cancelled",
)


# =============================================================================
# Technical Metrics
# =============================================================================

summary_latency = Histogram(
    "ledger_summary_latency_seconds",
    "Time spent aggregating totals in seconds",
    ["scope"],  # person, category, global
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_person_created() -> None:
    if settings.metrics_enabled:
        people_created_total.inc()


def record_category_created(purpose: str) -> None:
    if settings.metrics_enabled:
        categories_created_total.labels(purpose=purpose).inc()


def record_transaction_created(transaction_type: str) -> None:
    if settings.metrics_enabled:
        transactions_created_total.labels(type=transaction_type).inc()


def record_transaction_rejected(reason: str) -> None:
    if settings.metrics_enabled:
        transactions_rejected_total.labels(reason=reason).inc()


def record_transaction_cancelled() -> None:
    if settings.metrics_enabled:
        transactions_cancelled_total.inc()


@contextmanager
def track_summary_latency(scope: str) -> Generator[None, None, None]:
    """Context manager to track how long a totals computation takes."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            summary_latency.labels(scope=scope).observe(time.perf_counter() - start)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)
