"""Unit tests for CustomerService: creation defaults, loyalty points, sales sync."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from shopdesk.application.schemas import CustomerCreate, LoyaltyPointsAdjustment
from shopdesk.application.services import CustomerService, SaleService
from shopdesk.domain.exceptions import BusinessRuleError, EntityNotFoundError
from shopdesk.infrastructure.storage import StoreRegistry

ADA = {"name": "Ada", "email": "a@x.com", "phone": "123", "address": "Addr", "segment": "new"}


@pytest.fixture
def registry(tmp_path: Path) -> StoreRegistry:
    return StoreRegistry.from_directory(tmp_path)


@pytest.fixture
def service(registry: StoreRegistry) -> CustomerService:
    return CustomerService(registry.customers, registry.sales)


@pytest.mark.asyncio
async def test_create_customer_starts_with_zero_totals(service: CustomerService):
    customer = await service.create(CustomerCreate.model_validate(ADA).to_fields())

    assert customer.id
    assert customer.created_at
    assert customer.total_orders == 0
    assert customer.total_spent == 0
    assert customer.loyalty_points == 0
    assert customer.segment == "new"


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_totals(service: CustomerService):
    customer = await service.create({**ADA, "loyaltyPoints": 9000, "totalSpent": 50})

    assert customer.loyalty_points == 0
    assert customer.total_spent == 0


def test_adjustment_outside_bounds_is_a_validation_error():
    with pytest.raises(ValidationError):
        LoyaltyPointsAdjustment(points=1500, reason="promo")
    with pytest.raises(ValidationError):
        LoyaltyPointsAdjustment(points=10, reason="")


@pytest.mark.asyncio
async def test_adjust_loyalty_points_updates_balance_and_history(service: CustomerService):
    customer = await service.create(ADA)

    updated = await service.adjust_loyalty_points(customer.id, 500, "promo")

    assert updated.loyalty_points == 500
    [entry] = await service.loyalty_history(customer.id)
    assert entry.points == 500
    assert entry.reason == "promo"
    assert entry.customer_id == customer.id
    assert entry.id


@pytest.mark.asyncio
async def test_adjust_below_zero_is_rejected_without_changes(
    service: CustomerService, registry: StoreRegistry
):
    customer = await service.create(ADA)
    await service.adjust_loyalty_points(customer.id, 50, "welcome")

    with pytest.raises(BusinessRuleError, match="below zero"):
        await service.adjust_loyalty_points(customer.id, -100, "refund")

    assert (await service.get(customer.id)).loyalty_points == 50
    assert len(await service.loyalty_history(customer.id)) == 1


@pytest.mark.asyncio
async def test_adjust_unknown_customer(service: CustomerService):
    with pytest.raises(EntityNotFoundError):
        await service.adjust_loyalty_points("missing", 10, "promo")


@pytest.mark.asyncio
async def test_update_cannot_change_loyalty_points(service: CustomerService):
    customer = await service.create(ADA)

    updated = await service.update(customer.id, {"loyaltyPoints": 700, "phone": "456"})

    assert updated.loyalty_points == 0
    assert updated.phone == "456"


@pytest.mark.asyncio
async def test_history_lives_beside_the_customers_array(
    service: CustomerService, registry: StoreRegistry
):
    customer = await service.create(ADA)
    await service.adjust_loyalty_points(customer.id, 20, "promo")

    document = json.loads(registry.customers.path.read_text(encoding="utf-8"))

    assert len(document["customers"]) == 1
    assert document["loyaltyPointsHistory"][0]["customerId"] == customer.id


@pytest.mark.asyncio
async def test_sync_with_sales_recomputes_totals_and_segment(
    service: CustomerService, registry: StoreRegistry
):
    regular = await service.create(ADA)
    idle = await service.create({**ADA, "name": "Grace"})
    sales = SaleService(registry.sales)
    for _ in range(3):
        await sales.create({
            "customerId": regular.id,
            "items": [{"productId": "p1", "quantity": 2, "unitPrice": 5}],
            "status": "paid",
            "paymentMethod": "cash",
        })

    changed = await service.sync_with_sales()

    assert changed == 1
    synced = await service.get(regular.id)
    assert synced.total_orders == 3
    assert synced.total_spent == 30
    assert synced.segment == "regular"
    assert (await service.get(idle.id)).segment == "new"
    assert await service.sync_with_sales() == 0
