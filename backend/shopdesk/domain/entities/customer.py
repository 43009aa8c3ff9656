"""Customer records and their loyalty-points ledger."""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shopdesk.domain.entities.record import Record

CustomerSegment = Literal["new", "regular", "vip"]

VIP_ORDER_THRESHOLD = 10
REGULAR_ORDER_THRESHOLD = 3


class Customer(Record):
    """A customer with running purchase totals and a loyalty balance."""

    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    segment: CustomerSegment = "new"
    total_orders: int = 0
    total_spent: float = 0
    loyalty_points: int = 0
    notes: str | None = None


class LoyaltyPointsEntry(BaseModel):
    """One immutable adjustment of a customer's loyalty balance.

    Entries are appended to the ``loyaltyPointsHistory`` array of the
    customers document and never updated or removed.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    customer_id: str
    points: int
    reason: str
    timestamp: str


def segment_for_order_count(total_orders: int) -> CustomerSegment:
    """Segment a customer by how many sales they have."""
    if total_orders >= VIP_ORDER_THRESHOLD:
        return "vip"
    if total_orders >= REGULAR_ORDER_THRESHOLD:
        return "regular"
    return "new"
