"""Sale endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import SaleBulkUpdate, SaleCreate
from shopdesk.application.services import SaleService
from shopdesk.domain.exceptions import EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_sale_service

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.get("")
async def list_sales(service: SaleService = Depends(get_sale_service)) -> dict:
    sales = await service.list_all()
    return {"sales": [s.to_document() for s in sales]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_sale(
    data: SaleCreate,
    service: SaleService = Depends(get_sale_service),
) -> dict:
    """Record a sale; ``total`` is computed from the lines."""
    sale = await service.create(data.to_fields())
    return {"sale": sale.to_document()}


@router.put("")
async def replace_sales(
    data: SaleBulkUpdate,
    service: SaleService = Depends(get_sale_service),
) -> dict:
    """Replace all sales at once; every id must already exist."""
    try:
        await service.replace_all(data.sales)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"message": "Sales updated successfully"}


@router.get("/{sale_id}")
async def get_sale(sale_id: str, service: SaleService = Depends(get_sale_service)) -> dict:
    try:
        sale = await service.get(sale_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"sale": sale.to_document()}


@router.api_route("/{sale_id}", methods=["PUT", "PATCH"])
async def update_sale(
    sale_id: str,
    data: SaleCreate,
    service: SaleService = Depends(get_sale_service),
) -> dict:
    try:
        sale = await service.update(sale_id, data.to_fields())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"sale": sale.to_document()}


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sale(sale_id: str, service: SaleService = Depends(get_sale_service)) -> None:
    try:
        await service.delete(sale_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
