"""Application services (use cases) for plain CRUD collections."""

from collections.abc import Mapping
from typing import Any, Generic

from shopdesk.application.interfaces import EntityStore, RecordT
from shopdesk.domain.entities import Costing, Order, landed_cost
from shopdesk.domain.exceptions import EntityNotFoundError


class RecordService(Generic[RecordT]):
    """CRUD over one collection. Depends on the EntityStore port (DI).

    Subclasses derive computed fields by overriding :meth:`_prepare_create`
    and :meth:`_prepare_update`.
    """

    def __init__(self, store: EntityStore[RecordT], entity_name: str):
        self._store = store
        self._entity_name = entity_name

    async def list_all(self) -> list[RecordT]:
        return await self._store.find_all()

    async def get(self, record_id: str) -> RecordT:
        record = await self._store.find_by_id(record_id)
        if record is None:
            raise EntityNotFoundError(self._entity_name, record_id)
        return record

    async def create(self, fields: Mapping[str, Any]) -> RecordT:
        return await self._store.create(self._prepare_create(dict(fields)))

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT:
        current = await self.get(record_id)
        updated = await self._store.update(
            record_id, self._prepare_update(current, dict(changes))
        )
        if updated is None:
            raise EntityNotFoundError(self._entity_name, record_id)
        return updated

    async def delete(self, record_id: str) -> None:
        if not await self._store.delete(record_id):
            raise EntityNotFoundError(self._entity_name, record_id)

    def _prepare_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return fields

    def _prepare_update(self, current: RecordT, changes: dict[str, Any]) -> dict[str, Any]:
        return changes


def _products_total(products: list[Mapping[str, Any]]) -> float:
    return sum(float(p.get("quantity", 0)) * float(p.get("unitPrice", 0)) for p in products)


class OrderService(RecordService[Order]):
    """Orders; ``total`` follows the product lines unless given explicitly."""

    def __init__(self, store: EntityStore[Order]):
        super().__init__(store, "Order")

    def _prepare_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        if fields.get("total") is None:
            fields["total"] = _products_total(fields.get("products") or [])
        return fields

    def _prepare_update(self, current: Order, changes: dict[str, Any]) -> dict[str, Any]:
        if "products" in changes and changes.get("total") is None:
            changes["total"] = _products_total(changes["products"] or [])
        return changes


_COST_FIELDS = ("purchasePrice", "shippingCost", "customsDuty", "taxes", "otherCosts")


class CostingService(RecordService[Costing]):
    """Costings; ``totalCost`` is the landed cost unless given explicitly."""

    def __init__(self, store: EntityStore[Costing]):
        super().__init__(store, "Costing")

    @staticmethod
    def _total(values: Mapping[str, Any]) -> float:
        return landed_cost(*(float(values.get(name) or 0) for name in _COST_FIELDS))

    def _prepare_create(self, fields: dict[str, Any]) -> dict[str, Any]:
        if fields.get("totalCost") is None:
            fields["totalCost"] = self._total(fields)
        return fields

    def _prepare_update(self, current: Costing, changes: dict[str, Any]) -> dict[str, Any]:
        if changes.get("totalCost") is None and any(name in changes for name in _COST_FIELDS):
            changes["totalCost"] = self._total({**current.to_document(), **changes})
        return changes
