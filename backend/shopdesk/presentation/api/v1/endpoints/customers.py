"""Customer endpoints, including loyalty points and the sales sync."""

from fastapi import APIRouter, Depends, HTTPException, status

from shopdesk.application.schemas import (
    CustomerCreate,
    CustomerSyncResult,
    CustomerUpdate,
    LoyaltyPointsAdjustment,
)
from shopdesk.application.services import CustomerService
from shopdesk.domain.exceptions import BusinessRuleError, EntityNotFoundError
from shopdesk.infrastructure.dependencies import get_customer_service

router = APIRouter(prefix="/customers", tags=["Customers"])


@router.get("")
async def list_customers(service: CustomerService = Depends(get_customer_service)) -> dict:
    customers = await service.list_all()
    return {"customers": [c.to_document() for c in customers]}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_customer(
    data: CustomerCreate,
    service: CustomerService = Depends(get_customer_service),
) -> dict:
    """Create a customer; totals and loyalty points start at zero."""
    customer = await service.create(data.to_fields())
    return {"customer": customer.to_document()}


@router.post("/sync", response_model=CustomerSyncResult, response_model_by_alias=True)
async def sync_customers(
    service: CustomerService = Depends(get_customer_service),
) -> CustomerSyncResult:
    """Recompute order counts, spend and segments from the stored sales."""
    updated = await service.sync_with_sales()
    return CustomerSyncResult(
        success=True,
        message="Customer orders synchronized successfully",
        customers_updated=updated,
    )


@router.get("/{customer_id}")
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> dict:
    try:
        customer = await service.get(customer_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"customer": customer.to_document()}


@router.api_route("/{customer_id}", methods=["PUT", "PATCH"])
async def update_customer(
    customer_id: str,
    data: CustomerUpdate,
    service: CustomerService = Depends(get_customer_service),
) -> dict:
    try:
        customer = await service.update(customer_id, data.to_changes())
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"customer": customer.to_document()}


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    try:
        await service.delete(customer_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{customer_id}/loyalty-points")
async def adjust_loyalty_points(
    customer_id: str,
    data: LoyaltyPointsAdjustment,
    service: CustomerService = Depends(get_customer_service),
) -> dict:
    """Add or deduct up to 1000 points; the balance may not go below zero."""
    try:
        customer = await service.adjust_loyalty_points(customer_id, data.points, data.reason)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BusinessRuleError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"customer": customer.to_document()}


@router.get("/{customer_id}/loyalty-points")
async def get_loyalty_history(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> dict:
    try:
        history = await service.loyalty_history(customer_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {"history": [entry.model_dump(by_alias=True) for entry in history]}
