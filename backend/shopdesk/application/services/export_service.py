"""Application service that renders stored collections as Excel workbooks."""

import asyncio
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from io import BytesIO
from typing import Any

from openpyxl import Workbook

from shopdesk.application.interfaces import EntityStore
from shopdesk.domain.entities import parse_timestamp

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Collections that can be exported one at a time, in "all" sheet order
COLLECTION_EXPORTS: tuple[str, ...] = ("customers", "inventory", "sales", "suppliers", "orders")
EXPORT_TYPES: tuple[str, ...] = (*COLLECTION_EXPORTS, "all")

Sheet = tuple[str, list[dict[str, Any]]]


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: bytes


def _cell(value: Any) -> Any:
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return value


def _render(sheets: list[Sheet]) -> bytes:
    """One worksheet per ``(title, rows)``; columns are the union of row keys."""
    wb = Workbook()
    for position, (title, rows) in enumerate(sheets):
        ws = wb.active if position == 0 else wb.create_sheet()
        ws.title = title

        columns: list[str] = []
        for row in rows:
            columns.extend(key for key in row if key not in columns)
        ws.append(columns)
        for row in rows:
            ws.append([_cell(row.get(column)) for column in columns])

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def _average(total: float, count: int) -> float:
    return round(total / count, 2) if count else 0


class ExportService:
    """Builds xlsx downloads of whole collections and of summary reports."""

    def __init__(self, stores: Mapping[str, EntityStore]):
        self._stores = stores

    async def _rows(self, collection: str) -> list[dict[str, Any]]:
        return [record.to_document() for record in await self._stores[collection].find_all()]

    async def export(self, export_type: str) -> ExportFile | None:
        """Workbook for one collection, or every collection for ``"all"``.

        Returns None when there is nothing to export. Empty collections get
        no sheet in the ``"all"`` workbook.

        Raises:
            ValueError: ``export_type`` is not one of ``EXPORT_TYPES``.
        """
        if export_type not in EXPORT_TYPES:
            raise ValueError(f"Invalid export type: {export_type}")

        if export_type == "all":
            names = COLLECTION_EXPORTS
            filename = "all_data.xlsx"
        else:
            names = (export_type,)
            filename = f"{export_type}.xlsx"

        collected = await asyncio.gather(*(self._rows(name) for name in names))
        sheets = [(name.capitalize(), rows) for name, rows in zip(names, collected) if rows]
        if not sheets:
            return None

        content = await asyncio.to_thread(_render, sheets)
        logger.info("Exported %s (%d sheets)", export_type, len(sheets))
        return ExportFile(filename=filename, content=content)

    async def export_reports(self, now: datetime | None = None) -> ExportFile:
        """Workbook with one metric/value summary sheet per core collection."""
        now = now or datetime.now(timezone.utc)
        sales, inventory, customers, orders = await asyncio.gather(
            self._stores["sales"].find_all(),
            self._stores["inventory"].find_all(),
            self._stores["customers"].find_all(),
            self._stores["orders"].find_all(),
        )

        sheets: list[Sheet] = [
            ("Sales Report", _sales_summary(sales)),
            ("Inventory Report", _inventory_summary(inventory)),
            ("Customers Report", _customers_summary(customers)),
            ("Orders Report", _orders_summary(orders)),
        ]
        content = await asyncio.to_thread(_render, sheets)
        logger.info("Generated business reports")
        return ExportFile(filename=f"business_reports_{now:%Y-%m-%d}.xlsx", content=content)


def _metrics(*pairs: tuple[str, Any]) -> list[dict[str, Any]]:
    return [{"metric": metric, "value": value} for metric, value in pairs]


def _sales_summary(sales: list) -> list[dict[str, Any]]:
    total = sum(sale.total for sale in sales)
    dates = [d for d in (parse_timestamp(sale.created_at) for sale in sales) if d]
    period = f"{min(dates):%Y-%m-%d} to {max(dates):%Y-%m-%d}" if dates else ""
    return _metrics(
        ("Report Type", "Sales Analysis"),
        ("Period", period),
        ("Total Sales", round(total, 2)),
        ("Number of Sales", len(sales)),
        ("Average Sale Value", _average(total, len(sales))),
    )


def _inventory_summary(inventory: list) -> list[dict[str, Any]]:
    in_stock = sum(item.quantity for item in inventory)
    return _metrics(
        ("Report Type", "Inventory Status"),
        ("Total Products", len(inventory)),
        ("Total Items in Stock", in_stock),
        ("Low Stock Items", sum(1 for item in inventory if item.is_low_stock)),
        ("Average Stock per Product", _average(in_stock, len(inventory))),
    )


def _customers_summary(customers: list) -> list[dict[str, Any]]:
    points = sum(customer.loyalty_points for customer in customers)
    return _metrics(
        ("Report Type", "Customer Analysis"),
        ("Total Customers", len(customers)),
        ("Total Loyalty Points", points),
        ("Average Points per Customer", _average(points, len(customers))),
    )


def _orders_summary(orders: list) -> list[dict[str, Any]]:
    value = sum(order.total or 0 for order in orders)
    return _metrics(
        ("Report Type", "Orders Overview"),
        ("Total Orders", len(orders)),
        ("Total Order Value", round(value, 2)),
        ("Average Order Value", _average(value, len(orders))),
        ("Pending Orders", sum(1 for order in orders if order.status == "pending")),
    )
