"""Person and opportunity business rules.

PersonService checks names, email syntax and phone length; OpportunityService
checks ask amounts and stages and warns about close dates already in the past.
Both turn missing rows into NotFoundError.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Protocol

import structlog
from email_validator import EmailNotValidError, validate_email

from src.fundrazor.core.errors import NotFoundError, ValidationError
from src.fundrazor.people.schemas import (
    VALID_STAGES,
    OpportunityCreate,
    OpportunityRead,
    OpportunityUpdate,
    PersonCreate,
    PersonRead,
    PersonUpdate,
)
from src.fundrazor.schemas.base import as_utc, column_values

logger = structlog.get_logger(__name__)

MIN_PHONE_DIGITS = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PersonStore(Protocol):
    async def list_persons(self, search: str | None = None) -> list[PersonRead]: ...

    async def get_person(self, person_id: str) -> PersonRead | None: ...

    async def create_person(self, values: dict[str, Any]) -> PersonRead: ...

    async def update_person(self, person_id: str, changes: dict[str, Any]) -> PersonRead | None: ...

    async def delete_person(self, person_id: str) -> PersonRead | None: ...


class OpportunityStore(Protocol):
    async def list_opportunities(
        self, person_id: str | None = None, owner_id: str | None = None
    ) -> list[OpportunityRead]: ...

    async def get_opportunity(self, opportunity_id: str) -> OpportunityRead | None: ...

    async def create_opportunity(self, values: dict[str, Any]) -> OpportunityRead: ...

    async def update_opportunity(
        self, opportunity_id: str, changes: dict[str, Any]
    ) -> OpportunityRead | None: ...

    async def delete_opportunity(self, opportunity_id: str) -> OpportunityRead | None: ...


def _check_email(email: str | None) -> None:
    # Blank emails are allowed; the data-health report counts them as missing
    if not email:
        return
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("Invalid email format")


def _check_phone(phone: str | None) -> None:
    if not phone:
        return
    if len(re.sub(r"\D", "", phone)) < MIN_PHONE_DIGITS:
        raise ValidationError(f"Phone number must have at least {MIN_PHONE_DIGITS} digits")


def _check_name(value: Any, label: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} is required")


class PersonService:
    def __init__(self, repository: PersonStore) -> None:
        self._repo = repository

    async def list_persons(self, search: str | None = None) -> list[PersonRead]:
        logger.debug("persons.fetching", search=search)
        persons = await self._repo.list_persons(search)
        logger.info("persons.fetched", count=len(persons), has_search=bool(search))
        return persons

    async def get_person(self, person_id: str) -> PersonRead:
        logger.debug("persons.fetching_one", person_id=person_id)
        person = await self._repo.get_person(person_id)
        if person is None:
            raise NotFoundError("Person")
        return person

    async def create_person(self, data: PersonCreate) -> PersonRead:
        logger.debug("persons.creating", first_name=data.first_name, last_name=data.last_name)

        _check_name(data.first_name, "First name")
        _check_name(data.last_name, "Last name")
        _check_email(data.primary_email)
        _check_phone(data.primary_phone)

        person = await self._repo.create_person(column_values(data.model_dump(exclude_none=True)))
        logger.info("persons.created", person_id=person.id)
        return person

    async def update_person(self, person_id: str, data: PersonUpdate) -> PersonRead:
        changes = data.model_dump(exclude_unset=True)
        logger.debug("persons.updating", person_id=person_id, updates=sorted(changes))

        existing = await self._repo.get_person(person_id)
        if existing is None:
            raise NotFoundError("Person")

        if "first_name" in changes:
            _check_name(changes["first_name"], "First name")
        if "last_name" in changes:
            _check_name(changes["last_name"], "Last name")
        _check_email(changes.get("primary_email"))
        _check_phone(changes.get("primary_phone"))

        updated = await self._repo.update_person(person_id, column_values(changes))
        if updated is None:
            raise NotFoundError("Person")

        logger.info("persons.updated", person_id=person_id)
        return updated

    async def delete_person(self, person_id: str) -> PersonRead:
        logger.debug("persons.deleting", person_id=person_id)
        deleted = await self._repo.delete_person(person_id)
        if deleted is None:
            raise NotFoundError("Person")
        logger.info("persons.deleted", person_id=person_id)
        return deleted


def _check_ask_amount(amount: Decimal | None) -> None:
    if amount is not None and amount <= 0:
        raise ValidationError("Ask amount must be greater than zero")


def _check_stage(stage: Any) -> None:
    stage = getattr(stage, "value", stage)
    if stage not in VALID_STAGES:
        raise ValidationError(f"Stage must be one of: {', '.join(VALID_STAGES)}")


class OpportunityService:
    """Opportunity CRUD with validation on create and update."""

    def __init__(
        self,
        repository: OpportunityStore,
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._repo = repository
        self._now = now

    async def list_opportunities(
        self, person_id: str | None = None, owner_id: str | None = None
    ) -> list[OpportunityRead]:
        logger.debug("opportunities.fetching", person_id=person_id, owner_id=owner_id)
        opportunities = await self._repo.list_opportunities(person_id=person_id, owner_id=owner_id)
        logger.info("opportunities.fetched", count=len(opportunities), owner_id=owner_id)
        return opportunities

    async def get_opportunity(self, opportunity_id: str) -> OpportunityRead:
        logger.debug("opportunities.fetching_one", opportunity_id=opportunity_id)
        opportunity = await self._repo.get_opportunity(opportunity_id)
        if opportunity is None:
            raise NotFoundError("Opportunity")
        return opportunity

    async def create_opportunity(self, data: OpportunityCreate) -> OpportunityRead:
        logger.debug(
            "opportunities.creating",
            person_id=data.person_id,
            ask_amount=str(data.ask_amount) if data.ask_amount is not None else None,
            stage=data.stage.value,
        )

        if not data.person_id or not data.person_id.strip():
            raise ValidationError("Person ID is required")
        _check_ask_amount(data.ask_amount)
        _check_stage(data.stage)

        # A past close date is allowed but worth flagging
        if data.close_date and as_utc(data.close_date) < self._now():
            logger.warning("opportunities.past_close_date", close_date=data.close_date.isoformat())

        opportunity = await self._repo.create_opportunity(
            column_values(data.model_dump(exclude_none=True))
        )
        logger.info(
            "opportunities.created",
            opportunity_id=opportunity.id,
            person_id=opportunity.person_id,
            stage=opportunity.stage,
        )
        return opportunity

    async def update_opportunity(
        self, opportunity_id: str, data: OpportunityUpdate
    ) -> OpportunityRead:
        changes = data.model_dump(exclude_unset=True)
        logger.debug("opportunities.updating", opportunity_id=opportunity_id, updates=sorted(changes))

        existing = await self._repo.get_opportunity(opportunity_id)
        if existing is None:
            raise NotFoundError("Opportunity")

        if "person_id" in changes and not changes["person_id"]:
            raise ValidationError("Person ID is required")
        if "stage" in changes:
            _check_stage(changes["stage"])
        _check_ask_amount(changes.get("ask_amount"))

        updated = await self._repo.update_opportunity(opportunity_id, column_values(changes))
        if updated is None:
            raise NotFoundError("Opportunity")

        logger.info(
            "opportunities.updated",
            opportunity_id=opportunity_id,
            person_id=updated.person_id,
            stage=updated.stage,
        )
        return updated

    async def delete_opportunity(self, opportunity_id: str) -> OpportunityRead:
        logger.debug("opportunities.deleting", opportunity_id=opportunity_id)
        deleted = await self._repo.delete_opportunity(opportunity_id)
        if deleted is None:
            raise NotFoundError("Opportunity")
        logger.info("opportunities.deleted", opportunity_id=opportunity_id, person_id=deleted.person_id)
        return deleted
