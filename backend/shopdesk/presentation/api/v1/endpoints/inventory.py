"""Inventory endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import (
    InventoryBulkUpdate,
    InventoryItemCreate,
    InventoryItemUpdate,
)
from shopdesk.application.services import InventoryService
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_inventory_service

router = APIRouter(prefix="/inventory", tags=["Inventory"])


@router.get("")
async def list_inventory(service: InventoryService = Depends(get_inventory_service)) -> dict:
    items = await service.list_all()
    return {"inventory": [i.to_document() for i in items]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    data: InventoryItemCreate,
    service: InventoryService = Depends(get_inventory_service),
) -> dict:
    item = await service.create(data.to_fields())
    return {"item": item.to_document()}


@router.put("")
async def replace_inventory(
    data: InventoryBulkUpdate,
    service: InventoryService = Depends(get_inventory_service),
) -> dict:
    """Replace all items at once; restock dates are kept."""
    try:
        await service.replace_all(data.inventory)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "Inventory updated successfully"}


@router.get("/low-stock")
async def list_low_stock(service: InventoryService = Depends(get_inventory_service)) -> dict:
    items = await service.low_stock()
    return {"inventory": [i.to_document() for i in items]}


@router.get("/{item_id}")
async def get_item(
    item_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> dict:
    try:
        item = await service.get(item_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"item": item.to_document()}


@router.api_route("/{item_id}", methods=["PUT", "PATCH"])
async def update_item(
    item_id: str,
    data: InventoryItemUpdate,
    service: InventoryService = Depends(get_inventory_service),
) -> dict:
    try:
        item = await service.update(item_id, data.to_changes())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"item": item.to_document()}


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: str,
    service: InventoryService = Depends(get_inventory_service),
) -> None:
    try:
        await service.delete(item_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
