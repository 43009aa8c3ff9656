from shopdesk.domain.entities.record import Record


class InventoryItem(Record):
    """A stocked product line."""

    name: str = ""
    sku: str = ""
    description: str = ""
    category: str = ""
    price: float = 0
    cost: float | None = None
    quantity: float = 0
    reorder_point: float = 0
    supplier: str = ""
    last_restocked: str | None = None
    location: str | None = None
    notes: str | None = None

    @property
    def is_low_stock(self) -> bool:
        return self.quantity <= self.reorder_point
