"""REST API endpoints for organization canvases."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request, status

from src.fundrazor.canvases.schemas import CanvasCreate, CanvasRead, CanvasUpdate, DeleteResult
from src.fundrazor.canvases.service import CanvasService

router = APIRouter(prefix="/organization-canvases", tags=["organization-canvases"])


def _get_canvas_service(request: Request) -> CanvasService:
    """Retrieve CanvasService from app.state, 503 if not available."""
    service = getattr(request.app.state, "canvas_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Canvas service not initialized",
        )
    return service


@router.get("", response_model=list[CanvasRead])
async def list_canvases(
    request: Request,
    owner_id: str | None = Query(default=None, alias="ownerId"),
) -> list[CanvasRead]:
    service = _get_canvas_service(request)
    return await service.list_canvases(owner_id)


@router.get("/{canvas_id}", response_model=CanvasRead)
async def get_canvas(canvas_id: str, request: Request) -> CanvasRead:
    service = _get_canvas_service(request)
    return await service.get_canvas(canvas_id)


@router.post("", response_model=CanvasRead)
async def create_canvas(body: CanvasCreate, request: Request) -> CanvasRead:
    service = _get_canvas_service(request)
    return await service.create_canvas(body)


@router.put("/{canvas_id}", response_model=CanvasRead)
async def update_canvas(canvas_id: str, body: CanvasUpdate, request: Request) -> CanvasRead:
    service = _get_canvas_service(request)
    return await service.update_canvas(canvas_id, body)


@router.delete("/{canvas_id}", response_model=DeleteResult)
async def delete_canvas(canvas_id: str, request: Request) -> DeleteResult:
    service = _get_canvas_service(request)
    await service.delete_canvas(canvas_id)
    return DeleteResult(success=True)
