"""Costing endpoints. Records are returned without an envelope."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import CostingCreate, CostingUpdate
from shopdesk.application.services import CostingService
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_costing_service

router = APIRouter(prefix="/costings", tags=["Costings"])


@router.get("")
async def list_costings(service: CostingService = Depends(get_costing_service)) -> list[dict]:
    return [c.to_document() for c in await service.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_costing(
    data: CostingCreate,
    service: CostingService = Depends(get_costing_service),
) -> dict:
    """Create a costing; ``totalCost`` defaults to the landed cost."""
    costing = await service.create(data.to_fields())
    return costing.to_document()


@router.get("/{costing_id}")
async def get_costing(
    costing_id: str,
    service: CostingService = Depends(get_costing_service),
) -> dict:
    try:
        costing = await service.get(costing_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return costing.to_document()


@router.api_route("/{costing_id}", methods=["PUT", "PATCH"])
async def update_costing(
    costing_id: str,
    data: CostingUpdate,
    service: CostingService = Depends(get_costing_service),
) -> dict:
    try:
        costing = await service.update(costing_id, data.to_changes())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return costing.to_document()


@router.delete("/{costing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_costing(
    costing_id: str,
    service: CostingService = Depends(get_costing_service),
) -> None:
    try:
        await service.delete(costing_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
