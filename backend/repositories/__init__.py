from .base import ItemStore
from .items import SqlItemStore
from .memory import InMemoryItemStore
from . import models

__all__ = ["ItemStore", "SqlItemStore", "InMemoryItemStore", "models", "build_item_store"]


def build_item_store(settings) -> ItemStore:
    """Pick the item store backend named by `settings.ITEM_STORE`."""
    if settings.ITEM_STORE == "memory":
        return InMemoryItemStore()
    if settings.ITEM_STORE == "sql":
        from db import make_engine

        return SqlItemStore(make_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO))
    raise ValueError(f"Unknown ITEM_STORE: {settings.ITEM_STORE!r} (expected 'sql' or 'memory')")
