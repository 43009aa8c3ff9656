from shopdesk.domain.entities.record import Record


class Costing(Record):
    """Landed-cost calculation for a product."""

    product_name: str = ""
    purchase_price: float = 0
    shipping_cost: float = 0
    customs_duty: float = 0
    taxes: float = 0
    other_costs: float = 0
    total_cost: float = 0
    suggested_price: float = 0
    profit_margin: float = 0


def landed_cost(
    purchase_price: float,
    shipping_cost: float,
    customs_duty: float,
    taxes: float,
    other_costs: float,
) -> float:
    return purchase_price + shipping_cost + customs_duty + taxes + other_costs
