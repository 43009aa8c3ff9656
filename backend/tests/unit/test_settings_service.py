"""Unit tests for SettingsService and BackupService."""

import asyncio
import json
from pathlib import Path

import pytest

from shopdesk.application.services import (
    BackupService,
    CurrencyService,
    EventBroadcaster,
    SettingsService,
)
from shopdesk.domain.exceptions import (
    CurrencyConversionError,
    InvalidBackupError,
    StorageReadError,
    StorageWriteError,
)
from shopdesk.infrastructure.storage import StoreRegistry
from shopdesk.infrastructure.storage import json_entity_store


@pytest.fixture
def registry(tmp_path: Path) -> StoreRegistry:
    return StoreRegistry.from_directory(tmp_path)


@pytest.fixture
def broadcaster() -> EventBroadcaster:
    return EventBroadcaster()


@pytest.fixture
def service(registry: StoreRegistry, broadcaster: EventBroadcaster) -> SettingsService:
    return SettingsService(
        settings_path=registry.settings_path,
        update_lock=registry.settings_lock,
        currency_service=CurrencyService(registry.as_mapping()),
        broadcaster=broadcaster,
    )


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.mark.asyncio
async def test_load_creates_defaults(service: SettingsService, registry: StoreRegistry):
    settings = await service.load()

    assert settings.currency == "USD"
    assert _read(registry.settings_path)["businessInfo"]["currency"] == "USD"


@pytest.mark.asyncio
async def test_stored_sections_are_merged_over_defaults(
    service: SettingsService, registry: StoreRegistry
):
    registry.settings_path.write_text(
        json.dumps({"businessInfo": {"name": "Shop", "currency": "XAF"}}), encoding="utf-8"
    )

    settings = await service.load()

    assert settings.business_info.name == "Shop"
    assert settings.currency == "XAF"
    assert settings.appearance.theme == "system"


@pytest.mark.asyncio
async def test_corrupt_settings_file_raises(service: SettingsService, registry: StoreRegistry):
    registry.settings_path.write_text("[1, 2", encoding="utf-8")

    with pytest.raises(StorageReadError):
        await service.load()


@pytest.mark.asyncio
async def test_update_merges_section_and_broadcasts(
    service: SettingsService, broadcaster: EventBroadcaster
):
    stream = broadcaster.subscribe()
    pending = asyncio.ensure_future(stream.__anext__())
    await asyncio.sleep(0)
    assert broadcaster.subscriber_count == 1

    await service.update({"businessInfo": {"name": "Shop"}})

    message = await pending
    assert message.startswith("event: settings_updated\n")
    assert '"name": "Shop"' in message
    settings = await service.load()
    assert settings.business_info.name == "Shop"
    assert settings.currency == "USD"
    await stream.aclose()
    assert broadcaster.subscriber_count == 0


@pytest.mark.asyncio
async def test_currency_change_converts_stored_amounts(
    service: SettingsService, registry: StoreRegistry
):
    await registry.inventory.create({"name": "Soap", "sku": "SOAP", "price": 10})

    settings = await service.update({"businessInfo": {"currency": "XAF"}})

    assert settings.currency == "XAF"
    [item] = await registry.inventory.find_all()
    assert item.price == 6559.6


@pytest.mark.asyncio
async def test_failed_conversion_keeps_previous_currency(
    service: SettingsService, registry: StoreRegistry, monkeypatch
):
    real_write = json_entity_store.write_json

    def failing_write(path: Path, data):
        if path.name == "orders.json":
            raise StorageWriteError(str(path), "Disk full")
        real_write(path, data)

    monkeypatch.setattr(json_entity_store, "write_json", failing_write)

    with pytest.raises(CurrencyConversionError) as exc_info:
        await service.update({"businessInfo": {"currency": "EUR"}})

    assert exc_info.value.failed == ["orders"]
    assert (await service.load()).currency == "USD"


@pytest.mark.asyncio
async def test_backup_and_restore(service: SettingsService, registry: StoreRegistry):
    customer = await registry.customers.create({"name": "Ada"})
    backups = BackupService(registry.as_mapping(), service)

    backup = await backups.create_backup()

    assert backup["metadata"]["version"] == "1.0.0"
    assert backup["customers"]["customers"][0]["id"] == customer.id
    assert (await service.load()).backup.last_backup == backup["metadata"]["createdAt"]

    await registry.customers.clear()
    restored = await backups.restore_backup(backup)

    assert set(restored) == {"settings", "customers", "inventory", "sales", "suppliers"}
    assert [c.id for c in await registry.customers.find_all()] == [customer.id]


@pytest.mark.asyncio
async def test_restore_requires_version(service: SettingsService, registry: StoreRegistry):
    backups = BackupService(registry.as_mapping(), service)

    with pytest.raises(InvalidBackupError):
        await backups.restore_backup({"customers": {"customers": []}})
    with pytest.raises(InvalidBackupError):
        await backups.restore_backup({"metadata": {"version": "1.0.0"}, "sales": {"sales": {}}})


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "customers",
    [
        [{"name": "no id"}],
        [{"id": "c2", "name": "Bo", "segment": "gold"}],
        [{"id": "c3", "name": "Cy"}, {"id": "c3", "name": "Cy again"}],
        ["not a record"],
    ],
)
async def test_restore_rejects_invalid_records_without_writing(
    service: SettingsService, registry: StoreRegistry, customers: list
):
    existing = await registry.customers.create({"name": "Ada"})
    before = registry.customers.path.read_bytes()
    backups = BackupService(registry.as_mapping(), service)

    with pytest.raises(InvalidBackupError, match="customers"):
        await backups.restore_backup(
            {
                "metadata": {"version": "1.0.0"},
                "inventory": {"inventory": []},
                "customers": {"customers": customers},
            }
        )

    assert registry.customers.path.read_bytes() == before
    assert not registry.inventory.path.exists()
    assert [c.id for c in await registry.customers.find_all()] == [existing.id]


@pytest.mark.asyncio
async def test_restore_rejects_unsupported_settings_currency(
    service: SettingsService, registry: StoreRegistry
):
    await service.load()
    backups = BackupService(registry.as_mapping(), service)

    with pytest.raises(InvalidBackupError, match="currency"):
        await backups.restore_backup(
            {
                "metadata": {"version": "1.0.0"},
                "settings": {"businessInfo": {"currency": "JPY"}},
                "customers": {"customers": []},
            }
        )

    assert (await service.load()).currency == "USD"
    assert not registry.customers.path.exists()
