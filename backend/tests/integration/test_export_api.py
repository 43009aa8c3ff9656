"""HTTP contract tests for the spreadsheet export endpoints."""

from collections.abc import Iterator
from io import BytesIO
from pathlib import Path

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from openpyxl import load_workbook

from shopdesk.infrastructure.dependencies import get_store_registry
from shopdesk.infrastructure.storage import StoreRegistry
from shopdesk.main import app as shopdesk_app

SOAP = {
    "name": "Soap",
    "sku": "SOAP-1",
    "description": "Olive oil soap",
    "category": "Hygiene",
    "price": 4,
    "quantity": 2,
    "reorderPoint": 5,
    "supplier": "Acme",
}

XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture
def app(tmp_path: Path) -> Iterator[FastAPI]:
    registry = StoreRegistry.from_directory(tmp_path)
    shopdesk_app.dependency_overrides[get_store_registry] = lambda: registry
    yield shopdesk_app
    shopdesk_app.dependency_overrides.clear()


def _client(app: FastAPI) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_export_inventory_downloads_workbook(app: FastAPI):
    async with _client(app) as client:
        created = await client.post("/api/v1/inventory", json=SOAP)
        assert created.status_code == 201
        response = await client.get("/api/v1/export/inventory")

    assert response.status_code == 200
    assert response.headers["content-type"] == XLSX
    assert response.headers["content-disposition"] == 'attachment; filename="inventory.xlsx"'
    ws = load_workbook(BytesIO(response.content))["Inventory"]
    header = [cell.value for cell in ws[1]]
    assert ws.cell(row=2, column=header.index("name") + 1).value == "Soap"


@pytest.mark.asyncio
async def test_export_empty_collection_is_not_found(app: FastAPI):
    async with _client(app) as client:
        response = await client.get("/api/v1/export/orders")

    assert response.status_code == 404
    assert response.json() == {"error": "No data to export"}


@pytest.mark.asyncio
async def test_export_unknown_type_is_rejected(app: FastAPI):
    async with _client(app) as client:
        response = await client.get("/api/v1/export/products")

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid export type"}


@pytest.mark.asyncio
async def test_export_reports_always_has_four_sheets(app: FastAPI):
    async with _client(app) as client:
        response = await client.get("/api/v1/export/reports")

    assert response.status_code == 200
    assert response.headers["content-disposition"].startswith(
        'attachment; filename="business_reports_'
    )
    assert len(load_workbook(BytesIO(response.content)).sheetnames) == 4
