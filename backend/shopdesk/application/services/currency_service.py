"""Application service keeping stored amounts consistent with the base currency.

When the business switches currency, every known monetary field in the
affected collections is rewritten in place. Each collection is converted
and written on its own; there is no rollback across collections, so a
failed run can leave some collections converted and others not.
"""

import asyncio
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from shopdesk.application.interfaces import EntityStore
from shopdesk.domain.currency import convert_amount, convert_for_display

logger = logging.getLogger(__name__)

# Monetary field paths per collection. "a.b" descends into an object,
# "items[].price" visits every element of an array.
MONETARY_FIELDS: dict[str, tuple[str, ...]] = {
    "sales": (
        "amount",
        "totalPrice",
        "unitPrice",
        "total",
        "items[].unitPrice",
    ),
    "orders": (
        "totalAmount",
        "items[].price",
        "items[].total",
        "total",
        "products[].unitPrice",
        "costs.purchase",
        "costs.shipping",
        "costs.taxes",
        "costs.bankCharges",
        "costs.platformCommission",
        "costs.deliveryToForwarder",
        "payments.supplier",
        "payments.forwarder",
    ),
    "inventory": ("price", "cost"),
    "customers": ("totalSpent",),
    "reports": ("data.revenue", "data.expenses", "data.profit"),
}

CONVERTED_COLLECTIONS: tuple[str, ...] = tuple(MONETARY_FIELDS)


def _convert_path(node: Any, path: list[str], convert: Callable[[float], float]) -> None:
    """Apply ``convert`` to the numeric value(s) at ``path`` inside ``node``.

    Missing, null and non-numeric values are left alone.
    """
    if not isinstance(node, dict) or not path:
        return

    head, *rest = path
    if head.endswith("[]"):
        children = node.get(head[:-2])
        if isinstance(children, list):
            for child in children:
                _convert_path(child, rest, convert)
        return

    if rest:
        _convert_path(node.get(head), rest, convert)
        return

    value = node.get(head)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        node[head] = convert(value)


@dataclass
class CurrencyConversionOutcome:
    """Result of converting every monetary collection."""

    from_currency: str
    to_currency: str
    converted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failed


class CurrencyService:
    """Converts single amounts and rewrites stored amounts between currencies."""

    def __init__(self, stores: Mapping[str, EntityStore]):
        self._stores = stores

    def convert_single(
        self, amount: float, from_currency: str, to_currency: str
    ) -> dict[str, Any]:
        """Convert one amount for display (XAF as whole units, others to cents)."""
        return {
            "from": from_currency,
            "to": to_currency,
            "amount": float(amount),
            "convertedAmount": convert_for_display(amount, from_currency, to_currency),
        }

    async def update_file_values(
        self, collection: str, from_currency: str, to_currency: str
    ) -> bool:
        """Convert every monetary field of one collection and write it back.

        Returns False instead of raising when anything goes wrong (unknown
        currency, unreadable or unwritable file); the file is left as it was.
        """
        paths = [p.split(".") for p in MONETARY_FIELDS.get(collection, ())]

        def convert(value: float) -> float:
            return convert_amount(value, from_currency, to_currency)

        def convert_document(document: dict[str, Any]) -> None:
            for record in document.get(collection) or []:
                for path in paths:
                    _convert_path(record, path, convert)

        try:
            store = self._stores[collection]
            await store.transform_document(convert_document)
        except Exception:
            logger.exception(
                "Failed to convert %s from %s to %s", collection, from_currency, to_currency
            )
            return False

        logger.info("Converted %s from %s to %s", collection, from_currency, to_currency)
        return True

    async def convert_collections(
        self,
        from_currency: str,
        to_currency: str,
        collections: tuple[str, ...] = CONVERTED_COLLECTIONS,
    ) -> CurrencyConversionOutcome:
        """Convert all monetary collections concurrently.

        The outcome succeeds only if every collection succeeded. Collections
        that were rewritten stay rewritten even when another one failed.
        """
        outcome = CurrencyConversionOutcome(from_currency, to_currency)
        if from_currency == to_currency:
            return outcome

        results = await asyncio.gather(
            *(self.update_file_values(name, from_currency, to_currency) for name in collections)
        )
        for name, ok in zip(collections, results):
            (outcome.converted if ok else outcome.failed).append(name)

        if outcome.failed:
            logger.error(
                "Currency conversion %s -> %s incomplete: converted=%s failed=%s",
                from_currency,
                to_currency,
                outcome.converted,
                outcome.failed,
            )
        return outcome
