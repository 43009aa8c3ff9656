from pydantic import Field

from shopdesk.application.schemas.base import CamelModel


class CostingCreate(CamelModel):
    """Landed-cost inputs; ``totalCost`` is derived when omitted."""

    product_name: str = Field(..., min_length=1)
    purchase_price: float = Field(..., ge=0)
    shipping_cost: float = Field(0, ge=0)
    customs_duty: float = Field(0, ge=0)
    taxes: float = Field(0, ge=0)
    other_costs: float = Field(0, ge=0)
    total_cost: float | None = Field(None, ge=0)
    suggested_price: float = Field(0, ge=0)
    profit_margin: float = 0


class CostingUpdate(CamelModel):
    product_name: str | None = Field(None, min_length=1)
    purchase_price: float | None = Field(None, ge=0)
    shipping_cost: float | None = Field(None, ge=0)
    customs_duty: float | None = Field(None, ge=0)
    taxes: float | None = Field(None, ge=0)
    other_costs: float | None = Field(None, ge=0)
    total_cost: float | None = Field(None, ge=0)
    suggested_price: float | None = Field(None, ge=0)
    profit_margin: float | None = None
