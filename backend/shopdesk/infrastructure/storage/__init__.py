from .json_entity_store import JsonEntityStore
from .store_registry import StoreRegistry

__all__ = [
    "JsonEntityStore",
    "StoreRegistry",
]
