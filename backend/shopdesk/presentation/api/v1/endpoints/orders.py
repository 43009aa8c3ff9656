"""Supplier order endpoints. Records are returned without an envelope."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import OrderCreate
from shopdesk.application.services import OrderService
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_order_service

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("")
async def list_orders(service: OrderService = Depends(get_order_service)) -> list[dict]:
    return [o.to_document() for o in await service.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(
    data: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> dict:
    order = await service.create(data.to_fields())
    return order.to_document()


@router.get("/{order_id}")
async def get_order(order_id: str, service: OrderService = Depends(get_order_service)) -> dict:
    try:
        order = await service.get(order_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return order.to_document()


@router.api_route("/{order_id}", methods=["PUT", "PATCH"])
async def update_order(
    order_id: str,
    data: OrderCreate,
    service: OrderService = Depends(get_order_service),
) -> dict:
    try:
        order = await service.update(order_id, data.to_fields())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return order.to_document()


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(order_id: str, service: OrderService = Depends(get_order_service)) -> None:
    try:
        await service.delete(order_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
