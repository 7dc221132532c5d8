"""Category service - orchestrates the category use cases."""

from dataclasses import replace
from typing import List, Optional

import structlog

from household_ledger.application.dto import (
    CategoryRequest,
    CategoryResponse,
    CategoryWithTotalsResponse,
)
from household_ledger.core.metrics import record_category_created, track_summary_latency
from household_ledger.domain.aggregates import Category
from household_ledger.domain.events import CategoryCreated
from household_ledger.domain.exceptions import (
    CategoryNotFoundException,
    InvalidCategoryException,
)
from household_ledger.domain.interfaces import (
    CategoryRepository,
    DomainEventPublisher,
    TransactionRepository,
)
from household_ledger.domain.services import CategoryValidationService
from household_ledger.service.aggregation import Totals, totals_by_category

logger = structlog.get_logger(__name__)


class CategoryService:
    """Application service for category use cases."""

    def __init__(
        self,
        category_repository: CategoryRepository,
        transaction_repository: TransactionRepository,
        event_publisher: DomainEventPublisher,
        validation_service: Optional[CategoryValidationService] = None,
    ):
        self._category_repo = category_repository
        self._transaction_repo = transaction_repository
        self._publisher = event_publisher
        self._validation = validation_service or CategoryValidationService()

    async def create_category(self, request: CategoryRequest) -> CategoryResponse:
        """
        Register a new category and publish CategoryCreated.

        Raises:
            InvalidCategoryException: If the description or purpose is
                invalid, or the description is already in use (case-insensitive)
        """
        purpose = request.to_purpose()
        self._validation.validate_category_creation(request.description, purpose)

        category, events = Category.create(request.description, purpose)

        if await self._category_repo.exists_with_description(category.description.value):
            logger.warning(
                "category_description_taken",
                description=category.description.value,
            )
            raise InvalidCategoryException(
                "a category with this description already exists"
            )

        saved = await self._category_repo.save(category)

        # The event was raised before storage assigned the id
        await self._publisher.publish(
            [
                replace(event, category_id=saved.id)
                if isinstance(event, CategoryCreated)
                else event
                for event in events
            ]
        )
        record_category_created(saved.purpose.value)

        logger.info(
            "category_created",
            category_id=saved.id,
            purpose=saved.purpose.value,
        )

        return CategoryResponse.from_entity(saved)

    async def get_category(self, category_id: int) -> CategoryResponse:
        return CategoryResponse.from_entity(await self._load(category_id))

    async def list_categories(self) -> List[CategoryResponse]:
        """Categories ordered by description."""
        categories = await self._category_repo.list_all()
        return [CategoryResponse.from_entity(c) for c in categories]

    async def list_categories_with_totals(self) -> List[CategoryWithTotalsResponse]:
        categories = await self._category_repo.list_all()
        transactions = await self._transaction_repo.list_all()

        with track_summary_latency("category"):
            totals = totals_by_category(transactions)

        return [
            CategoryWithTotalsResponse.from_entity(
                category, totals.get(category.id, Totals.zero())
            )
            for category in categories
        ]

    async def delete_category(self, category_id: int) -> None:
        """
        Deactivate and remove a category.

        Raises:
            CategoryNotFoundException: If the category does not exist
            InvalidCategoryException: If transactions still reference it
        """
        category = await self._load(category_id)
        category.deactivate()

        await self._category_repo.delete(category_id)
        logger.info("category_deleted", category_id=category_id)

    async def _load(self, category_id: int) -> Category:
        category = await self._category_repo.get_by_id(category_id)
        if category is None:
            logger.warning("category_not_found", category_id=category_id)
            raise CategoryNotFoundException(category_id)
        return category
