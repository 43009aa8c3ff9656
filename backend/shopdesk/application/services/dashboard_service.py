"""Read-only aggregates for the dashboard."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any

from shopdesk.application.interfaces import EntityStore
from shopdesk.domain.entities import Customer, InventoryItem, Order, Sale, parse_timestamp

MONTH_NAMES = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
ACTIVE_CUSTOMER_WINDOW = timedelta(days=30)
RECENT_SALES_LIMIT = 5


def _month_start(moment: datetime, months_back: int = 0) -> datetime:
    year, month = moment.year, moment.month - months_back
    while month < 1:
        month += 12
        year -= 1
    return moment.replace(year=year, month=month, day=1, hour=0, minute=0, second=0, microsecond=0)


class DashboardService:
    def __init__(
        self,
        sales: EntityStore[Sale],
        orders: EntityStore[Order],
        customers: EntityStore[Customer],
        inventory: EntityStore[InventoryItem],
    ):
        self._sales = sales
        self._orders = orders
        self._customers = customers
        self._inventory = inventory

    async def summary(self, now: datetime | None = None) -> dict[str, Any]:
        """Metrics, revenue per calendar month and the latest sales.

        ``revenueGrowth`` compares this month's revenue with last month's,
        in percent; it is 0 when last month had no revenue.
        """
        now = now or datetime.now(timezone.utc)
        sales, orders, customers, inventory = await asyncio.gather(
            self._sales.find_all(),
            self._orders.find_all(),
            self._customers.find_all(),
            self._inventory.find_all(),
        )
        dated = [(sale, parse_timestamp(sale.created_at)) for sale in sales]

        this_month = _month_start(now)
        last_month = _month_start(now, 1)
        current_revenue = sum(s.total for s, at in dated if at and at >= this_month)
        previous_revenue = sum(s.total for s, at in dated if at and last_month <= at < this_month)
        growth = (
            (current_revenue - previous_revenue) / previous_revenue * 100
            if previous_revenue
            else 0
        )

        by_month: dict[int, float] = {}
        for sale, at in dated:
            if at is not None:
                by_month[at.month] = by_month.get(at.month, 0) + sale.total
        overview = [
            {"name": MONTH_NAMES[month - 1], "total": round(total, 2)}
            for month, total in sorted(by_month.items())
        ]

        active_since = now - ACTIVE_CUSTOMER_WINDOW
        active_customers = {s.customer_id for s, at in dated if at and at >= active_since}

        customers_by_id = {c.id: c for c in customers}
        latest = sorted(
            dated,
            key=lambda pair: pair[1] or datetime.min.replace(tzinfo=timezone.utc),
            reverse=True,
        )[:RECENT_SALES_LIMIT]
        recent_sales = []
        for sale, _ in latest:
            customer = customers_by_id.get(sale.customer_id)
            recent_sales.append({
                "id": sale.id,
                "total": sale.total,
                "customer": (
                    {
                        "name": customer.name or "Unknown Customer",
                        "email": customer.email or "No email",
                    }
                    if customer
                    else None
                ),
                "date": sale.created_at,
            })

        return {
            "metrics": {
                "totalRevenue": sum(s.total for s in sales),
                "revenueGrowth": growth,
                "totalOrders": len(orders),
                "activeCustomers": len(active_customers),
                "inventoryItems": len(inventory),
            },
            "overview": overview,
            "recentSales": recent_sales,
        }
