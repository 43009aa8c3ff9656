"""Application service (use case) for sales."""

from collections.abc import Mapping
from typing import Any

from shopdesk.application.interfaces import EntityStore
from shopdesk.application.services.record_service import RecordService
from shopdesk.domain.entities import Sale, sale_total


class SaleService(RecordService[Sale]):
    """Sales CRUD. ``total`` is always recomputed from the sale lines."""

    def __init__(self, store: EntityStore[Sale]):
        super().__init__(store, "Sale")

    def _prepare_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return {**fields, "total": sale_total(fields.get("items") or [])}

    def _prepare_update(self, current: Sale, changes: dict[str, Any]) -> dict[str, Any]:
        if "items" in changes:
            changes["total"] = sale_total(changes["items"] or [])
        return changes

    async def replace_all(self, sales: list[Mapping[str, Any]]) -> list[Sale]:
        """Replace the stored sales with ``sales``; every id must already exist."""
        return await self._store.replace_many(sales)
