"""Organization canvas business rules."""

from __future__ import annotations

from typing import Any, Protocol

import structlog

from src.fundrazor.canvases.schemas import CanvasCreate, CanvasRead, CanvasUpdate
from src.fundrazor.core.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

RESOURCE = "Organization canvas"


class CanvasStore(Protocol):
    async def list_canvases(self, owner_id: str | None = None) -> list[CanvasRead]: ...

    async def get_canvas(self, canvas_id: str) -> CanvasRead | None: ...

    async def create_canvas(self, values: dict[str, Any]) -> CanvasRead: ...

    async def update_canvas(self, canvas_id: str, changes: dict[str, Any]) -> CanvasRead | None: ...

    async def delete_canvas(self, canvas_id: str) -> CanvasRead | None: ...


class CanvasService:
    def __init__(self, repository: CanvasStore) -> None:
        self._repo = repository

    async def list_canvases(self, owner_id: str | None = None) -> list[CanvasRead]:
        logger.debug("canvases.fetching", owner_id=owner_id)
        canvases = await self._repo.list_canvases(owner_id)
        logger.info("canvases.fetched", count=len(canvases), owner_id=owner_id)
        return canvases

    async def get_canvas(self, canvas_id: str) -> CanvasRead:
        logger.debug("canvases.fetching_one", canvas_id=canvas_id)
        canvas = await self._repo.get_canvas(canvas_id)
        if canvas is None:
            logger.warning("canvases.not_found", canvas_id=canvas_id)
            raise NotFoundError(RESOURCE)
        return canvas

    async def create_canvas(self, data: CanvasCreate) -> CanvasRead:
        logger.debug("canvases.creating", name=data.name, owner_id=data.owner_id)

        if not data.name or not data.name.strip():
            raise ValidationError("Canvas name is required")
        if not data.owner_id or not data.owner_id.strip():
            raise ValidationError("Owner ID is required")

        canvas = await self._repo.create_canvas(data.model_dump())
        logger.info("canvases.created", canvas_id=canvas.id, name=canvas.name)
        return canvas

    async def update_canvas(self, canvas_id: str, data: CanvasUpdate) -> CanvasRead:
        changes = data.model_dump(exclude_unset=True)
        logger.debug("canvases.updating", canvas_id=canvas_id, updates=sorted(changes))

        if "name" in changes and (changes["name"] is None or not changes["name"].strip()):
            raise ValidationError("Canvas name cannot be empty")
        owner_id = changes.get("owner_id")
        if owner_id is not None and not owner_id.strip():
            raise ValidationError("Owner ID cannot be empty")
        if "canvas_data" in changes and changes["canvas_data"] is None:
            raise ValidationError("Canvas data is required")
        if "is_default" in changes and changes["is_default"] is None:
            raise ValidationError("Default flag is required")

        canvas = await self._repo.update_canvas(canvas_id, changes)
        if canvas is None:
            logger.warning("canvases.not_found_for_update", canvas_id=canvas_id)
            raise NotFoundError(RESOURCE)

        logger.info("canvases.updated", canvas_id=canvas_id)
        return canvas

    async def delete_canvas(self, canvas_id: str) -> None:
        logger.debug("canvases.deleting", canvas_id=canvas_id)

        existing = await self._repo.get_canvas(canvas_id)
        if existing is None:
            logger.warning("canvases.not_found_for_delete", canvas_id=canvas_id)
            raise NotFoundError(RESOURCE)

        await self._repo.delete_canvas(canvas_id)
        logger.info("canvases.deleted", canvas_id=canvas_id)
