"""Unit tests for converting stored amounts between currencies."""

import json
from pathlib import Path

import pytest

from shopdesk.application.services import CurrencyService
from shopdesk.domain.exceptions import StorageWriteError
from shopdesk.infrastructure.storage import StoreRegistry
from shopdesk.infrastructure.storage import json_entity_store


def _write(path: Path, document: dict) -> None:
    path.write_text(json.dumps(document), encoding="utf-8")


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def registry(tmp_path: Path) -> StoreRegistry:
    _write(
        tmp_path / "sales.json",
        {
            "sales": [
                {
                    "id": "s1",
                    "customerId": "c1",
                    "items": [{"productId": "p1", "quantity": 2, "unitPrice": 50}],
                    "total": 100,
                },
                {"id": "s2", "customerId": "c1", "amount": 10, "totalPrice": 10, "unitPrice": 5},
            ]
        },
    )
    _write(
        tmp_path / "inventory.json",
        {"inventory": [{"id": "i1", "name": "Soap", "price": 100, "cost": None, "quantity": 3}]},
    )
    _write(
        tmp_path / "orders.json",
        {
            "orders": [
                {
                    "id": "o1",
                    "products": [{"name": "Box", "quantity": 1, "unitPrice": 20}],
                    "costs": {"purchase": 20, "shipping": 5},
                    "payments": {"supplier": 20},
                    "notes": "no price here",
                }
            ]
        },
    )
    _write(
        tmp_path / "reports.json",
        {"reports": [{"id": "r1", "title": "Q1", "data": {"revenue": 1000, "orders": 12}}]},
    )
    return StoreRegistry.from_directory(tmp_path)


@pytest.fixture
def service(registry: StoreRegistry) -> CurrencyService:
    return CurrencyService(registry.as_mapping())


def test_convert_single_rounds_xaf_to_whole_units(service: CurrencyService):
    result = service.convert_single(100, "USD", "XAF")

    assert result == {"from": "USD", "to": "XAF", "amount": 100.0, "convertedAmount": 65596}


@pytest.mark.asyncio
async def test_convert_collections_rewrites_every_monetary_field(
    service: CurrencyService, tmp_path: Path
):
    outcome = await service.convert_collections("USD", "EUR")

    assert outcome.succeeded
    assert sorted(outcome.converted) == ["customers", "inventory", "orders", "reports", "sales"]

    current, legacy = _read(tmp_path / "sales.json")["sales"]
    assert current["total"] == 92.0
    assert current["items"][0]["unitPrice"] == 46.0
    assert current["items"][0]["quantity"] == 2
    assert legacy["amount"] == 9.2
    assert legacy["totalPrice"] == 9.2
    assert legacy["unitPrice"] == 4.6

    [item] = _read(tmp_path / "inventory.json")["inventory"]
    assert item["price"] == 92.0
    assert item["cost"] is None
    assert item["quantity"] == 3

    [order] = _read(tmp_path / "orders.json")["orders"]
    assert order["products"][0]["unitPrice"] == 18.4
    assert order["costs"] == {"purchase": 18.4, "shipping": 4.6}
    assert order["payments"] == {"supplier": 18.4}

    [report] = _read(tmp_path / "reports.json")["reports"]
    assert report["data"] == {"revenue": 920.0, "orders": 12}


@pytest.mark.asyncio
async def test_same_currency_is_a_no_op(service: CurrencyService, tmp_path: Path):
    before = (tmp_path / "sales.json").read_text(encoding="utf-8")

    outcome = await service.convert_collections("USD", "USD")

    assert outcome.succeeded
    assert (tmp_path / "sales.json").read_text(encoding="utf-8") == before


@pytest.mark.asyncio
async def test_unknown_currency_fails_every_collection(service: CurrencyService, tmp_path: Path):
    before = (tmp_path / "sales.json").read_text(encoding="utf-8")

    outcome = await service.convert_collections("USD", "JPY")

    assert not outcome.succeeded
    assert "sales" in outcome.failed
    assert (tmp_path / "sales.json").read_text(encoding="utf-8") == before


@pytest.mark.asyncio
async def test_failed_collection_does_not_roll_back_the_others(
    service: CurrencyService, tmp_path: Path, monkeypatch
):
    real_write = json_entity_store.write_json

    def failing_write(path: Path, data):
        if path.name == "inventory.json":
            raise StorageWriteError(str(path), "Disk full")
        real_write(path, data)

    monkeypatch.setattr(json_entity_store, "write_json", failing_write)

    outcome = await service.convert_collections("USD", "EUR")

    assert not outcome.succeeded
    assert outcome.failed == ["inventory"]
    assert "sales" in outcome.converted
    # sales.json was rewritten even though the run as a whole failed
    assert _read(tmp_path / "sales.json")["sales"][0]["total"] == 92.0
    assert _read(tmp_path / "inventory.json")["inventory"][0]["price"] == 100
