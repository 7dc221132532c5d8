"""Person service - orchestrates the person use cases."""

from typing import List

import structlog

from household_ledger.application.dto import PersonRequest, PersonResponse
from household_ledger.core.metrics import record_person_created, track_summary_latency
from household_ledger.domain.aggregates import Person
from household_ledger.domain.exceptions import (
    InvalidPersonException,
    PersonNotFoundException,
)
from household_ledger.domain.interfaces import PersonRepository, TransactionRepository
from household_ledger.service.aggregation import (
    Totals,
    calculate_totals,
    totals_by_person,
)

logger = structlog.get_logger(__name__)


class PersonService:
    """
    Application service for person use cases.

    Totals are computed from the stored transactions on every read.
    """

    def __init__(
        self,
        person_repository: PersonRepository,
        transaction_repository: TransactionRepository,
    ):
        self._person_repo = person_repository
        self._transaction_repo = transaction_repository

    async def create_person(self, request: PersonRequest) -> PersonResponse:
        """
        Register a new person.

        Raises:
            InvalidPersonException: If the name or age is invalid, or the
                name is already taken
        """
        person = Person.create(request.name, request.age)

        existing = await self._person_repo.get_by_name(person.name.value)
        if existing is not None:
            logger.warning("person_name_taken", name=person.name.value)
            raise InvalidPersonException(
                f"a person named '{person.name.value}' already exists"
            )

        saved = await self._person_repo.save(person)
        record_person_created()

        logger.info(
            "person_created",
            person_id=saved.id,
            is_minor=saved.is_minor,
        )

        return PersonResponse.from_entity(saved, Totals.zero())

    async def update_person(self, person_id: int, request: PersonRequest) -> PersonResponse:
        """
        Rename a person and/or change their age.

        Raises:
            PersonNotFoundException: If the person does not exist
            InvalidPersonException: If the new values are invalid or the
                name belongs to someone else
        """
        person = await self._load(person_id)

        person.update_name(request.name)
        person.update_age(request.age)

        other = await self._person_repo.get_by_name(person.name.value)
        if other is not None and other.id != person.id:
            raise InvalidPersonException(
                f"a person named '{person.name.value}' already exists"
            )

        saved = await self._person_repo.save(person)
        logger.info("person_updated", person_id=person_id, age=saved.age.value)

        return await self._with_totals(saved)

    async def delete_person(self, person_id: int) -> None:
        """
        Deactivate a person and remove them from storage.

        Storage removes the person's transactions along with them.

        Raises:
            PersonNotFoundException: If the person does not exist
        """
        person = await self._load(person_id)
        person.deactivate()

        await self._person_repo.delete(person_id)
        logger.info("person_deleted", person_id=person_id)

    async def get_person(self, person_id: int) -> PersonResponse:
        """
        Raises:
            PersonNotFoundException: If the person does not exist
        """
        person = await self._load(person_id)
        return await self._with_totals(person)

    async def list_people(self) -> List[PersonResponse]:
        people = await self._person_repo.list_all()
        transactions = await self._transaction_repo.list_all()

        by_id = {person.id: person for person in people}
        for transaction in transactions:
            owner = by_id.get(transaction.person_id)
            if owner is not None:
                owner.add_transaction(transaction.id)

        with track_summary_latency("person"):
            totals = totals_by_person(transactions)

        logger.info("people_listed", count=len(people))

        return [
            PersonResponse.from_entity(person, totals.get(person.id, Totals.zero()))
            for person in people
        ]

    async def _load(self, person_id: int) -> Person:
        person = await self._person_repo.get_by_id(person_id)
        if person is None:
            logger.warning("person_not_found", person_id=person_id)
            raise PersonNotFoundException(person_id)
        return person

    async def _with_totals(self, person: Person) -> PersonResponse:
        transactions = await self._transaction_repo.list_by_person(person.id)
        for transaction in transactions:
            person.add_transaction(transaction.id)

        with track_summary_latency("person"):
            totals = calculate_totals(transactions)

        return PersonResponse.from_entity(person, totals)
