"""Transaction service - orchestrates the transaction use cases."""

from dataclasses import replace
from typing import List, Optional

import structlog

from household_ledger.application.dto import TransactionRequest, TransactionResponse
from household_ledger.core.metrics import (
    record_transaction_cancelled,
    record_transaction_created,
    record_transaction_rejected,
)
from household_ledger.domain.aggregates import Transaction
from household_ledger.domain.events import TransactionCreated
from household_ledger.domain.exceptions import (
    InvalidTransactionException,
    TransactionNotFoundException,
)
from household_ledger.domain.interfaces import (
    CategoryRepository,
    DomainEventPublisher,
    PersonRepository,
    TransactionRepository,
)
from household_ledger.domain.services import (
    CategoryValidationService,
    TransactionValidationService,
)

logger = structlog.get_logger(__name__)

REASON_NOT_FOUND = "not_found"


class TransactionService:
    """
    Application service for transaction use cases.

    Creating a transaction:
        1. Load the person and the category from storage
        2. Ask the category validation service whether the category
           accepts the requested type
        3. Validate with the transaction validation service
        4. Build the aggregate (which re-runs the same rule gate)
        5. Persist, then publish the events
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        person_repository: PersonRepository,
        category_repository: CategoryRepository,
        event_publisher: DomainEventPublisher,
        transaction_validation: Optional[TransactionValidationService] = None,
        category_validation: Optional[CategoryValidationService] = None,
    ):
        self._transaction_repo = transaction_repository
        self._person_repo = person_repository
        self._category_repo = category_repository
        self._publisher = event_publisher
        self._transaction_validation = (
            transaction_validation or TransactionValidationService()
        )
        self._category_validation = category_validation or CategoryValidationService()

    async def create_transaction(self, request: TransactionRequest) -> TransactionResponse:
        """
        Register a transaction.

        Raises:
            InvalidTransactionException: If the person or category does not
                exist, or any business rule fails
        """
        log = logger.bind(
            person_id=request.person_id,
            category_id=request.category_id,
        )

        try:
            transaction, events = await self._build(request)
        except InvalidTransactionException as e:
            log.warning("transaction_rejected", reason=e.reason, message=e.message)
            record_transaction_rejected(e.reason)
            raise

        saved = await self._transaction_repo.save(transaction)

        # The event was raised before storage assigned the id
        await self._publisher.publish(
            [
                replace(event, transaction_id=saved.id)
                if isinstance(event, TransactionCreated)
                else event
                for event in events
            ]
        )
        record_transaction_created(saved.type.value)

        log.info(
            "transaction_created",
            transaction_id=saved.id,
            type=saved.type.value,
            amount=str(saved.amount.amount),
        )

        return TransactionResponse.from_entity(saved)

    async def get_transaction(self, transaction_id: int) -> TransactionResponse:
        return TransactionResponse.from_entity(await self._load(transaction_id))

    async def list_transactions(self) -> List[TransactionResponse]:
        """All transactions, newest first."""
        transactions = await self._transaction_repo.list_all()
        return [TransactionResponse.from_entity(t) for t in transactions]

    async def cancel_transaction(self, transaction_id: int) -> TransactionResponse:
        """
        Cancel a transaction. Cancelled transactions no longer count in totals.

        Raises:
            TransactionNotFoundException: If the transaction does not exist
            InvalidTransactionException: If it is already cancelled
        """
        transaction = await self._load(transaction_id)
        transaction.cancel()

        saved = await self._transaction_repo.save(transaction)
        record_transaction_cancelled()
        logger.info("transaction_cancelled", transaction_id=transaction_id)

        return TransactionResponse.from_entity(saved)

    async def _build(self, request: TransactionRequest):
        person = await self._person_repo.get_by_id(request.person_id)
        if person is None:
            raise InvalidTransactionException(
                f"person with id {request.person_id} not found",
                reason=REASON_NOT_FOUND,
            )

        category = await self._category_repo.get_by_id(request.category_id)
        if category is None:
            raise InvalidTransactionException(
                f"category with id {request.category_id} not found",
                reason=REASON_NOT_FOUND,
            )

        transaction_type = request.to_transaction_type()
        category_supports_type = self._category_validation.supports_transaction_type(
            category.purpose, transaction_type
        )

        self._transaction_validation.validate_transaction_creation(
            amount=request.amount,
            transaction_type=transaction_type,
            category_id=category.id,
            person_id=person.id,
            is_person_minor=person.is_minor,
            category_supports_type=category_supports_type,
        )

        return Transaction.create(
            amount=request.amount,
            description=request.description,
            type=transaction_type,
            category_id=category.id,
            person_id=person.id,
            is_person_minor=person.is_minor,
            category_supports_type=category_supports_type,
        )

    async def _load(self, transaction_id: int) -> Transaction:
        transaction = await self._transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            logger.warning("transaction_not_found", transaction_id=transaction_id)
            raise TransactionNotFoundException(transaction_id)
        return transaction
