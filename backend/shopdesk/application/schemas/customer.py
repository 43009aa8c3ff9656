"""Pydantic DTOs for customers and loyalty points."""

from pydantic import Field

from shopdesk.application.schemas.base import CamelModel
from shopdesk.domain.entities import CustomerSegment

MAX_LOYALTY_ADJUSTMENT = 1000


class CustomerCreate(CamelModel):
    """Schema for creating a customer. Totals and loyalty start at zero."""

    name: str = Field(..., min_length=1, max_length=200, examples=["Ada"])
    email: str = Field("", max_length=254, examples=["a@x.com"])
    phone: str = Field("", max_length=50)
    address: str = Field("", max_length=500)
    segment: CustomerSegment = "new"
    notes: str | None = None


class CustomerUpdate(CamelModel):
    """Schema for updating a customer: all fields optional.

    The loyalty balance is not editable here; it changes only through
    loyalty-point adjustments, which also record history.
    """

    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(None, max_length=254)
    phone: str | None = Field(None, max_length=50)
    address: str | None = Field(None, max_length=500)
    segment: CustomerSegment | None = None
    notes: str | None = None
    total_orders: int | None = Field(None, ge=0)
    total_spent: float | None = Field(None, ge=0)


class LoyaltyPointsAdjustment(CamelModel):
    """A single manual change to a customer's loyalty balance."""

    points: int = Field(
        ...,
        ge=-MAX_LOYALTY_ADJUSTMENT,
        le=MAX_LOYALTY_ADJUSTMENT,
        description="Points to add (positive) or deduct (negative)",
    )
    reason: str = Field(..., min_length=1, max_length=500)


class CustomerSyncResult(CamelModel):
    success: bool
    message: str
    customers_updated: int
