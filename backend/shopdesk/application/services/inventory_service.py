"""Application service (use case) for inventory items."""

from collections.abc import Mapping
from typing import Any

from shopdesk.application.interfaces import EntityStore
from shopdesk.application.services.record_service import RecordService
from shopdesk.domain.entities import InventoryItem, utc_timestamp


class InventoryService(RecordService[InventoryItem]):
    def __init__(self, store: EntityStore[InventoryItem]):
        super().__init__(store, "InventoryItem")

    def _prepare_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        if not fields.get("lastRestocked"):
            fields["lastRestocked"] = utc_timestamp()
        return fields

    async def low_stock(self) -> list[InventoryItem]:
        return [item for item in await self.list_all() if item.is_low_stock]

    async def replace_all(self, items: list[Mapping[str, Any]]) -> list[InventoryItem]:
        """Bulk replacement (e.g. converted prices); restock dates are kept."""
        return await self._store.replace_many(items, preserve=("lastRestocked",))
