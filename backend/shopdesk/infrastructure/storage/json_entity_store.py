"""Concrete EntityStore backed by one JSON file per collection.

File layout: ``<data_dir>/<collection>.json`` containing
``{"<collection>": [ ...records ]}``. Other top-level keys in the file are
carried through every write untouched.

Every mutation is a full read-modify-write of the file. Each store holds an
``asyncio.Lock`` so that, within one process, read-modify-write cycles on the
same collection run one at a time and never overwrite each other's changes.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from shopdesk.application.interfaces import EntityStore, RecordT
from shopdesk.domain.entities import utc_timestamp
from shopdesk.domain.exceptions import EntityNotFoundError, StorageReadError
from shopdesk.infrastructure.storage.json_file import read_json, write_json

logger = logging.getLogger(__name__)

# Assigned by the store; never taken from caller-supplied changes
_SYSTEM_FIELDS = ("id", "createdAt", "updatedAt")

RecordMigration = Callable[[dict[str, Any]], dict[str, Any]]


class JsonEntityStore(EntityStore[RecordT]):
    """Implements the EntityStore port over a flat JSON file.

    Args:
        data_dir: Directory holding the collection files.
        collection_name: Key of the record array, also the file's base name.
        record_type: Model used to expose stored mappings as typed records.
        migrate: Optional load-time upgrade applied to each stored mapping
            before validation. It only shapes the returned records; the file
            is not rewritten until the next mutation.
    """

    def __init__(
        self,
        data_dir: str | Path,
        collection_name: str,
        record_type: type[RecordT],
        *,
        migrate: RecordMigration | None = None,
    ):
        self.collection_name = collection_name
        self._path = Path(data_dir) / f"{collection_name}.json"
        self._record_type = record_type
        self._migrate = migrate
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ── File access ─────────────────────────────────────────────────

    def _load_sync(self) -> dict[str, Any]:
        document = read_json(self._path, {self.collection_name: []})
        if not isinstance(document, dict):
            raise StorageReadError(str(self._path), "Expected a JSON object")

        items = document.get(self.collection_name)
        if items is None:
            document[self.collection_name] = []
        elif not isinstance(items, list):
            raise StorageReadError(
                str(self._path), f"Expected '{self.collection_name}' to be an array"
            )
        return document

    async def _load(self) -> dict[str, Any]:
        return await asyncio.to_thread(self._load_sync)

    async def _save(self, document: dict[str, Any]) -> None:
        await asyncio.to_thread(write_json, self._path, document)

    # ── Mapping helpers ─────────────────────────────────────────────

    def _to_record(self, raw: dict[str, Any]) -> RecordT:
        if self._migrate is not None:
            raw = self._migrate(raw)
        try:
            return self._record_type.model_validate(raw)
        except ValidationError as exc:
            raise StorageReadError(
                str(self._path),
                f"Record {raw.get('id')!r} does not match {self._record_type.__name__} "
                f"({exc.error_count()} errors)",
            ) from exc

    @staticmethod
    def _index_of(items: list[dict[str, Any]], record_id: str) -> int | None:
        for index, item in enumerate(items):
            if item.get("id") == record_id:
                return index
        return None

    @staticmethod
    def _without_system_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
        return {k: v for k, v in fields.items() if k not in _SYSTEM_FIELDS}

    # ── EntityStore ─────────────────────────────────────────────────

    async def find_all(self) -> list[RecordT]:
        async with self._lock:
            document = await self._load()
        return [self._to_record(raw) for raw in document[self.collection_name]]

    async def find_by_id(self, record_id: str) -> RecordT | None:
        async with self._lock:
            document = await self._load()
        items = document[self.collection_name]
        index = self._index_of(items, record_id)
        return self._to_record(items[index]) if index is not None else None

    async def create(self, fields: Mapping[str, Any]) -> RecordT:
        now = utc_timestamp()
        async with self._lock:
            document = await self._load()
            items = document[self.collection_name]

            existing_ids = {item.get("id") for item in items}
            record_id = str(uuid4())
            while record_id in existing_ids:
                record_id = str(uuid4())

            raw = {
                **self._without_system_fields(fields),
                "id": record_id,
                "createdAt": now,
                "updatedAt": now,
            }
            record = self._to_record(raw)
            items.append(raw)
            await self._save(document)

        logger.debug("Created %s/%s", self.collection_name, record_id)
        return record

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT | None:
        async with self._lock:
            document = await self._load()
            items = document[self.collection_name]
            index = self._index_of(items, record_id)
            if index is None:
                return None

            current = items[index]
            merged = {**current, **self._without_system_fields(changes)}
            merged["updatedAt"] = utc_timestamp()
            record = self._to_record(merged)
            items[index] = merged
            await self._save(document)

        logger.debug("Updated %s/%s", self.collection_name, record_id)
        return record

    async def delete(self, record_id: str) -> bool:
        async with self._lock:
            document = await self._load()
            items = document[self.collection_name]
            index = self._index_of(items, record_id)
            if index is None:
                return False

            del items[index]
            await self._save(document)

        logger.debug("Deleted %s/%s", self.collection_name, record_id)
        return True

    async def replace_many(
        self,
        records: list[Mapping[str, Any]],
        *,
        preserve: Iterable[str] = (),
    ) -> list[RecordT]:
        """Replace the collection with ``records`` in the given order.

        Each incoming record must carry the ``id`` of a stored record; it is
        merged over the stored one, keeping ``createdAt`` and every field
        named in ``preserve``. Stored records absent from ``records`` are
        dropped.

        Raises:
            EntityNotFoundError: if an incoming id is not stored. Nothing is
                written in that case.
        """
        preserved = tuple(preserve)
        now = utc_timestamp()
        async with self._lock:
            document = await self._load()
            by_id = {item.get("id"): item for item in document[self.collection_name]}

            replaced: list[dict[str, Any]] = []
            for incoming in records:
                record_id = incoming.get("id")
                existing = by_id.get(record_id)
                if existing is None:
                    raise EntityNotFoundError(self._record_type.__name__, str(record_id))

                merged = {**existing, **self._without_system_fields(incoming)}
                for key in preserved:
                    if key in existing:
                        merged[key] = existing[key]
                merged["updatedAt"] = now
                replaced.append(merged)

            result = [self._to_record(raw) for raw in replaced]
            document[self.collection_name] = replaced
            await self._save(document)

        logger.info("Replaced %d %s records", len(replaced), self.collection_name)
        return result

    async def clear(self) -> None:
        async with self._lock:
            document = await self._load()
            document[self.collection_name] = []
            await self._save(document)
        logger.info("Cleared %s", self.collection_name)

    def validate_document(self, document: Any) -> list[RecordT]:
        if not isinstance(document, dict):
            raise ValueError(f"'{self.collection_name}' must be an object")
        items = document.get(self.collection_name)
        if not isinstance(items, list):
            raise ValueError(f"'{self.collection_name}' must contain a '{self.collection_name}' array")

        records: list[RecordT] = []
        seen: set[str] = set()
        for position, raw in enumerate(items):
            if not isinstance(raw, dict):
                raise ValueError(f"{self.collection_name}[{position}] is not an object")
            if self._migrate is not None:
                raw = self._migrate(raw)
            try:
                record = self._record_type.model_validate(raw)
            except ValidationError as exc:
                raise ValueError(
                    f"{self.collection_name}[{position}] is not a valid "
                    f"{self._record_type.__name__}: {exc.errors()[0]['msg']}"
                ) from exc
            if record.id in seen:
                raise ValueError(f"{self.collection_name}[{position}] repeats id {record.id!r}")
            seen.add(record.id)
            records.append(record)
        return records

    async def read_document(self) -> dict[str, Any]:
        async with self._lock:
            return await self._load()

    async def write_document(self, document: dict[str, Any]) -> None:
        async with self._lock:
            await self._save(document)

    async def transform_document(
        self, transform: Callable[[dict[str, Any]], None]
    ) -> dict[str, Any]:
        async with self._lock:
            document = await self._load()
            transform(document)
            await self._save(document)
        return document
