from .entity_store import EntityStore, RecordT

__all__ = [
    "EntityStore",
    "RecordT",
]
