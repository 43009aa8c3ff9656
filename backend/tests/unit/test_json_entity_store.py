"""Unit tests for the JSON-file backed EntityStore."""

import asyncio
import json
from pathlib import Path

import pytest

from shopdesk.domain.entities import Customer, Sale, upgrade_sale_document
from shopdesk.domain.exceptions import EntityNotFoundError, StorageReadError, StorageWriteError
from shopdesk.infrastructure.storage import JsonEntityStore
from shopdesk.infrastructure.storage.json_file import write_json


def _customer_fields(name: str = "Ada") -> dict:
    return {"name": name, "email": "a@x.com", "phone": "123", "address": "Addr", "segment": "new"}


@pytest.fixture
def store(tmp_path: Path) -> JsonEntityStore[Customer]:
    return JsonEntityStore(tmp_path, "customers", Customer)


def _read(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.mark.asyncio
async def test_missing_file_is_an_empty_collection_and_is_created(store, tmp_path: Path):
    assert await store.find_all() == []
    assert _read(tmp_path / "customers.json") == {"customers": []}


@pytest.mark.asyncio
async def test_create_assigns_system_fields(store):
    created = await store.create(_customer_fields())

    assert created.id
    assert created.created_at
    assert created.updated_at == created.created_at

    found = await store.find_by_id(created.id)
    assert found == created
    assert found.name == "Ada"


@pytest.mark.asyncio
async def test_create_ignores_caller_supplied_system_fields(store):
    created = await store.create({**_customer_fields(), "id": "mine", "createdAt": "yesterday"})

    assert created.id != "mine"
    assert created.created_at != "yesterday"


@pytest.mark.asyncio
async def test_empty_update_only_touches_updated_at(store):
    created = await store.create(_customer_fields())

    updated = await store.update(created.id, {})

    assert updated is not None
    assert updated.updated_at >= created.updated_at
    assert updated.model_dump(exclude={"updated_at"}) == created.model_dump(exclude={"updated_at"})


@pytest.mark.asyncio
async def test_update_merges_fields_and_keeps_identity(store):
    created = await store.create(_customer_fields())

    updated = await store.update(created.id, {"phone": "999", "id": "other"})

    assert updated.id == created.id
    assert updated.phone == "999"
    assert updated.email == "a@x.com"
    assert updated.created_at == created.created_at


@pytest.mark.asyncio
async def test_update_unknown_id_returns_none_and_leaves_file_unchanged(store):
    await store.create(_customer_fields())
    before = store.path.read_text(encoding="utf-8")

    assert await store.update("missing", {"name": "X"}) is None
    assert store.path.read_text(encoding="utf-8") == before


@pytest.mark.asyncio
async def test_delete_removes_exactly_one_record(store):
    first = await store.create(_customer_fields("Ada"))
    await store.create(_customer_fields("Grace"))

    assert await store.delete(first.id) is True

    assert await store.find_by_id(first.id) is None
    remaining = await store.find_all()
    assert [c.name for c in remaining] == ["Grace"]


@pytest.mark.asyncio
async def test_delete_unknown_id_returns_false(store):
    await store.create(_customer_fields())
    before = await store.find_all()

    assert await store.delete("missing") is False
    assert await store.find_all() == before


@pytest.mark.asyncio
async def test_corrupt_file_raises_instead_of_resetting(store):
    store.path.write_text("{not json", encoding="utf-8")

    with pytest.raises(StorageReadError):
        await store.find_all()
    assert store.path.read_text(encoding="utf-8") == "{not json"


@pytest.mark.asyncio
async def test_wrong_shape_raises(store):
    store.path.write_text(json.dumps({"customers": {"a": 1}}), encoding="utf-8")

    with pytest.raises(StorageReadError):
        await store.find_all()


@pytest.mark.asyncio
async def test_unserializable_value_raises_write_error_and_keeps_file(store, tmp_path: Path):
    existing = await store.create(_customer_fields())
    before = (tmp_path / "customers.json").read_bytes()

    with pytest.raises(StorageWriteError):
        await store.create({**_customer_fields("Bo"), "tags": {"vip", "wholesale"}})
    with pytest.raises(StorageWriteError):
        await store.update(existing.id, {"tags": {"vip"}})

    assert (tmp_path / "customers.json").read_bytes() == before
    assert [p.name for p in tmp_path.iterdir() if p.suffix == ".tmp"] == []
    assert [c.id for c in await store.find_all()] == [existing.id]


def test_write_json_maps_os_errors_to_write_error(tmp_path: Path):
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(StorageWriteError):
        write_json(blocker / "data" / "customers.json", {"customers": []})


@pytest.mark.asyncio
async def test_other_top_level_keys_survive_writes(store):
    store.path.write_text(
        json.dumps({"customers": [], "loyaltyPointsHistory": [{"id": "h1"}]}),
        encoding="utf-8",
    )

    await store.create(_customer_fields())

    assert _read(store.path)["loyaltyPointsHistory"] == [{"id": "h1"}]


@pytest.mark.asyncio
async def test_unknown_record_fields_are_kept(store):
    created = await store.create({**_customer_fields(), "vatNumber": "CM-1"})

    await store.update(created.id, {"phone": "1"})

    [raw] = _read(store.path)["customers"]
    assert raw["vatNumber"] == "CM-1"


@pytest.mark.asyncio
async def test_concurrent_creates_are_not_lost(store):
    await asyncio.gather(*(store.create(_customer_fields(f"C{i}")) for i in range(20)))

    assert len(await store.find_all()) == 20


@pytest.mark.asyncio
async def test_replace_many_keeps_preserved_fields_and_order(store):
    first = await store.create({**_customer_fields("Ada"), "notes": "keep me"})
    second = await store.create(_customer_fields("Grace"))

    result = await store.replace_many(
        [
            {"id": second.id, "name": "Grace H."},
            {"id": first.id, "name": "Ada L.", "notes": "overwritten"},
        ],
        preserve=("notes",),
    )

    assert [c.name for c in result] == ["Grace H.", "Ada L."]
    assert result[1].notes == "keep me"
    assert result[1].created_at == first.created_at


@pytest.mark.asyncio
async def test_replace_many_with_unknown_id_writes_nothing(store):
    created = await store.create(_customer_fields())
    before = store.path.read_text(encoding="utf-8")

    with pytest.raises(EntityNotFoundError):
        await store.replace_many([{"id": created.id, "name": "X"}, {"id": "ghost"}])
    assert store.path.read_text(encoding="utf-8") == before


@pytest.mark.asyncio
async def test_legacy_sales_are_upgraded_on_load(tmp_path: Path):
    (tmp_path / "sales.json").write_text(
        json.dumps({"sales": [{"id": "s1", "customerId": "c1", "totalPrice": 40, "amount": 40}]}),
        encoding="utf-8",
    )
    sales = JsonEntityStore(tmp_path, "sales", Sale, migrate=upgrade_sale_document)

    [sale] = await sales.find_all()

    assert sale.total == 40
    assert sale.items == []
    # The file itself is only rewritten by the next mutation
    assert "total" not in _read(tmp_path / "sales.json")["sales"][0]
