"""Purchase orders placed with suppliers."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from shopdesk.domain.entities.record import Record


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class OrderProduct(_CamelModel):
    name: str
    quantity: float
    unit_price: float
    product_id: str | None = None


class OrderCosts(_CamelModel):
    purchase: float = 0
    shipping: float = 0
    taxes: float = 0
    bank_charges: float = 0
    platform_commission: float = 0
    delivery_to_forwarder: float = 0


class OrderPayments(_CamelModel):
    supplier: float = 0
    forwarder: float = 0


class Order(Record):
    supplier_id: str = ""
    forwarder_id: str | None = None
    products: list[OrderProduct] = []
    status: str = "pending"
    costs: OrderCosts = Field(default_factory=OrderCosts)
    payments: OrderPayments = Field(default_factory=OrderPayments)
    total: float | None = None
    payment_method: str | None = None
    tracking_number: str | None = None
    expected_delivery_date: str | None = None
