"""HTTP contract tests for customers and loyalty points."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from shopdesk.infrastructure.dependencies import get_store_registry
from shopdesk.infrastructure.storage import StoreRegistry
from shopdesk.main import app as shopdesk_app

ADA = {"name": "Ada", "email": "a@x.com", "phone": "123", "address": "Addr", "segment": "new"}


@pytest.fixture
def app(tmp_path: Path) -> Iterator[FastAPI]:
    registry = StoreRegistry.from_directory(tmp_path)
    shopdesk_app.dependency_overrides[get_store_registry] = lambda: registry
    yield shopdesk_app
    shopdesk_app.dependency_overrides.clear()


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_create_customer(app: FastAPI):
    async with _client(app) as client:
        response = await client.post("/api/v1/customers", json=ADA)

    assert response.status_code == 201
    customer = response.json()["customer"]
    assert customer["id"]
    assert customer["createdAt"]
    assert customer["totalOrders"] == 0
    assert customer["totalSpent"] == 0
    assert customer["loyaltyPoints"] == 0


@pytest.mark.asyncio
async def test_create_customer_without_name_is_rejected(app: FastAPI):
    async with _client(app) as client:
        response = await client.post("/api/v1/customers", json={"email": "a@x.com"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid data"
    assert body["details"]


@pytest.mark.asyncio
async def test_loyalty_points_adjustment_rules(app: FastAPI):
    async with _client(app) as client:
        customer = (await client.post("/api/v1/customers", json=ADA)).json()["customer"]
        url = f"/api/v1/customers/{customer['id']}/loyalty-points"

        too_many = await client.post(url, json={"points": 1500, "reason": "promo"})
        accepted = await client.post(url, json={"points": 500, "reason": "promo"})
        overdrawn = await client.post(url, json={"points": -600, "reason": "refund"})
        history = await client.get(url)

    assert too_many.status_code == 400
    assert accepted.status_code == 200
    assert accepted.json()["customer"]["loyaltyPoints"] == 500
    assert overdrawn.status_code == 400
    assert overdrawn.json() == {"error": "Cannot reduce points below zero"}
    entries = history.json()["history"]
    assert [(e["points"], e["reason"]) for e in entries] == [(500, "promo")]


@pytest.mark.asyncio
async def test_unknown_customer_returns_404(app: FastAPI):
    async with _client(app) as client:
        fetched = await client.get("/api/v1/customers/nope")
        adjusted = await client.post(
            "/api/v1/customers/nope/loyalty-points", json={"points": 5, "reason": "x"}
        )
        deleted = await client.delete("/api/v1/customers/nope")

    assert fetched.status_code == 404
    assert "error" in fetched.json()
    assert adjusted.status_code == 404
    assert deleted.status_code == 404


@pytest.mark.asyncio
async def test_update_and_delete_customer(app: FastAPI):
    async with _client(app) as client:
        customer = (await client.post("/api/v1/customers", json=ADA)).json()["customer"]
        url = f"/api/v1/customers/{customer['id']}"

        patched = await client.patch(url, json={"phone": "456"})
        deleted = await client.delete(url)
        listed = await client.get("/api/v1/customers")

    assert patched.status_code == 200
    assert patched.json()["customer"]["phone"] == "456"
    assert patched.json()["customer"]["name"] == "Ada"
    assert deleted.status_code == 204
    assert listed.json() == {"customers": []}


@pytest.mark.asyncio
async def test_sync_customers_from_sales(app: FastAPI):
    async with _client(app) as client:
        customer = (await client.post("/api/v1/customers", json=ADA)).json()["customer"]
        sale = await client.post(
            "/api/v1/sales",
            json={
                "customerId": customer["id"],
                "items": [{"productId": "p1", "quantity": 3, "unitPrice": 2.5}],
                "status": "paid",
                "paymentMethod": "cash",
            },
        )
        synced = await client.post("/api/v1/customers/sync")
        fetched = await client.get(f"/api/v1/customers/{customer['id']}")

    assert sale.status_code == 201
    assert sale.json()["sale"]["total"] == 7.5
    assert synced.json() == {
        "success": True,
        "message": "Customer orders synchronized successfully",
        "customersUpdated": 1,
    }
    assert fetched.json()["customer"]["totalSpent"] == 7.5
    assert fetched.json()["customer"]["totalOrders"] == 1
