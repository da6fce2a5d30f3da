"""
In-memory item store for development and tests.

State lives only as long as the process; one instance is created at
startup and injected into the service.
"""
import itertools
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from domain.errors import NotFoundError, StorageError
from domain.models import Item
from repositories.base import ItemStore


class InMemoryItemStore(ItemStore):
    def __init__(self) -> None:
        self._items: Dict[int, Item] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def _require(self, item_id: int) -> Item:
        item = self._items.get(item_id)
        if item is None:
            raise NotFoundError()
        return item

    def _check_photo_unowned(self, photo_ref: Optional[str], owner_id: Optional[int] = None) -> None:
        if photo_ref is None:
            return
        for item in self._items.values():
            if item.photo_ref == photo_ref and item.id != owner_id:
                raise StorageError(f"Photo {photo_ref} already belongs to item {item.id}")

    def create(self, name: str, description: str = "", photo_ref: Optional[str] = None) -> Item:
        with self._lock:
            self._check_photo_unowned(photo_ref)
            item = Item(id=next(self._ids), name=name, description=description or "", photo_ref=photo_ref)
            self._items[item.id] = item
            return replace(item)

    def get(self, item_id: int) -> Item:
        with self._lock:
            return replace(self._require(item_id))

    def list(self) -> List[Item]:
        with self._lock:
            return [replace(self._items[key]) for key in sorted(self._items)]

    def update(
        self, item_id: int, name: Optional[str] = None, description: Optional[str] = None
    ) -> Item:
        with self._lock:
            item = self._require(item_id)
            if name is not None:
                item.name = name
            if description is not None:
                item.description = description
            return replace(item)

    def set_photo(self, item_id: int, photo_ref: Optional[str]) -> Item:
        with self._lock:
            item = self._require(item_id)
            self._check_photo_unowned(photo_ref, owner_id=item_id)
            item.photo_ref = photo_ref
            return replace(item)

    def delete(self, item_id: int) -> Item:
        with self._lock:
            self._require(item_id)
            return self._items.pop(item_id)
