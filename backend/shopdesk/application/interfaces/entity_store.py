"""Abstract repository interface (port) for a single collection of records."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, TypeVar

from shopdesk.domain.entities import Record

RecordT = TypeVar("RecordT", bound=Record)


class EntityStore(ABC, Generic[RecordT]):
    """Port for CRUD over one named collection: implemented in the infrastructure layer.

    The store assigns ``id``, ``createdAt`` and ``updatedAt``; callers never
    supply them. Field mappings passed in use the stored (camelCase) names.
    """

    collection_name: str

    @abstractmethod
    async def find_all(self) -> list[RecordT]:
        """Return every record in insertion order."""
        ...

    @abstractmethod
    async def find_by_id(self, record_id: str) -> RecordT | None:
        """Return the record with ``record_id``, or None."""
        ...

    @abstractmethod
    async def create(self, fields: Mapping[str, Any]) -> RecordT:
        """Persist a new record built from ``fields`` and return it."""
        ...

    @abstractmethod
    async def update(self, record_id: str, changes: Mapping[str, Any]) -> RecordT | None:
        """Shallow-merge ``changes`` into a record. Returns None if not found."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def replace_many(
        self,
        records: list[Mapping[str, Any]],
        *,
        preserve: Iterable[str] = (),
    ) -> list[RecordT]:
        """Replace the collection with ``records``, each of which must already exist."""
        ...

    @abstractmethod
    async def clear(self) -> None:
        """Remove every record."""
        ...

    @abstractmethod
    def validate_document(self, document: Any) -> list[RecordT]:
        """Check that ``document`` could be written and read back as this collection.

        Raises:
            ValueError: the document or one of its records is malformed.
        """
        ...

    @abstractmethod
    async def read_document(self) -> dict[str, Any]:
        """Return the whole stored document, including keys besides the collection."""
        ...

    @abstractmethod
    async def write_document(self, document: dict[str, Any]) -> None:
        """Overwrite the whole stored document."""
        ...

    @abstractmethod
    async def transform_document(
        self, transform: Callable[[dict[str, Any]], None]
    ) -> dict[str, Any]:
        """Read the document, let ``transform`` mutate it in place, write it back.

        The read and the write happen as one step with respect to other
        mutations of the same store.
        """
        ...
