"""Supplier endpoints. Records are returned without an envelope."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import SupplierCreate, SupplierUpdate
from shopdesk.application.services import RecordService
from shopdesk.domain.entities import Supplier
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_supplier_service

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


@router.get("")
async def list_suppliers(
    service: RecordService[Supplier] = Depends(get_supplier_service),
) -> list[dict]:
    return [s.to_document() for s in await service.list_all()]


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_supplier(
    data: SupplierCreate,
    service: RecordService[Supplier] = Depends(get_supplier_service),
) -> dict:
    supplier = await service.create(data.to_fields())
    return supplier.to_document()


@router.get("/{supplier_id}")
async def get_supplier(
    supplier_id: str,
    service: RecordService[Supplier] = Depends(get_supplier_service),
) -> dict:
    try:
        supplier = await service.get(supplier_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return supplier.to_document()


@router.api_route("/{supplier_id}", methods=["PUT", "PATCH"])
async def update_supplier(
    supplier_id: str,
    data: SupplierUpdate,
    service: RecordService[Supplier] = Depends(get_supplier_service),
) -> dict:
    try:
        supplier = await service.update(supplier_id, data.to_changes())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return supplier.to_document()


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_supplier(
    supplier_id: str,
    service: RecordService[Supplier] = Depends(get_supplier_service),
) -> None:
    try:
        await service.delete(supplier_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
