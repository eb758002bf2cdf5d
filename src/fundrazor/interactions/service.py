"""Interaction tracking business rules."""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from src.fundrazor.core.errors import NotFoundError, ValidationError
from src.fundrazor.interactions.schemas import (
    VALID_TYPES,
    InteractionCreate,
    InteractionRead,
    InteractionUpdate,
)
from src.fundrazor.schemas.base import column_values

logger = structlog.get_logger(__name__)

# NOT NULL columns a patch may not clear
_REQUIRED_ON_UPDATE = {
    "person_id": "Person ID is required",
    "type": "Interaction type is required",
    "occurred_at": "Occurred date/time is required",
}


class InteractionStore(Protocol):
    async def list_interactions(self, person_id: str | None = None) -> list[InteractionRead]: ...

    async def get_interaction(self, interaction_id: str) -> InteractionRead | None: ...

    async def create_interaction(self, values: dict[str, Any]) -> InteractionRead: ...

    async def update_interaction(
        self, interaction_id: str, changes: dict[str, Any]
    ) -> InteractionRead | None: ...

    async def delete_interaction(self, interaction_id: str) -> InteractionRead | None: ...


def _check_type(value: Any) -> None:
    value = getattr(value, "value", value)
    if value not in VALID_TYPES:
        raise ValidationError(f"Type must be one of: {', '.join(VALID_TYPES)}")


class InteractionService:
    def __init__(self, repository: InteractionStore) -> None:
        self._repo = repository

    async def list_interactions(self, person_id: str | None = None) -> list[InteractionRead]:
        logger.debug("interactions.fetching", person_id=person_id)
        interactions = await self._repo.list_interactions(person_id)
        logger.info("interactions.fetched", count=len(interactions), person_id=person_id)
        return interactions

    async def get_interaction(self, interaction_id: str) -> InteractionRead:
        logger.debug("interactions.fetching_one", interaction_id=interaction_id)
        interaction = await self._repo.get_interaction(interaction_id)
        if interaction is None:
            raise NotFoundError("Interaction")
        return interaction

    async def create_interaction(self, data: InteractionCreate) -> InteractionRead:
        logger.debug("interactions.creating", person_id=data.person_id, type=data.type)

        if not data.person_id:
            raise ValidationError("Person ID is required")
        if not data.type:
            raise ValidationError("Interaction type is required")
        _check_type(data.type)
        if not data.occurred_at:
            raise ValidationError("Occurred date/time is required")

        interaction = await self._repo.create_interaction(
            column_values(data.model_dump(exclude_none=True))
        )
        logger.info(
            "interactions.created",
            interaction_id=interaction.id,
            person_id=interaction.person_id,
            type=interaction.type,
        )
        return interaction

    async def update_interaction(
        self, interaction_id: str, data: InteractionUpdate
    ) -> InteractionRead:
        changes = data.model_dump(exclude_unset=True)
        logger.debug("interactions.updating", interaction_id=interaction_id, updates=sorted(changes))

        existing = await self._repo.get_interaction(interaction_id)
        if existing is None:
            raise NotFoundError("Interaction")

        for required, message in _REQUIRED_ON_UPDATE.items():
            if required in changes and changes[required] is None:
                raise ValidationError(message)
        if "type" in changes:
            _check_type(changes["type"])

        updated = await self._repo.update_interaction(interaction_id, column_values(changes))
        if updated is None:
            raise NotFoundError("Interaction")

        logger.info(
            "interactions.updated",
            interaction_id=interaction_id,
            person_id=updated.person_id,
            type=updated.type,
        )
        return updated

    async def delete_interaction(self, interaction_id: str) -> InteractionRead:
        logger.debug("interactions.deleting", interaction_id=interaction_id)
        deleted = await self._repo.delete_interaction(interaction_id)
        if deleted is None:
            raise NotFoundError("Interaction")
        logger.info("interactions.deleted", interaction_id=interaction_id, person_id=deleted.person_id)
        return deleted
