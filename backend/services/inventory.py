"""
Inventory service: keeps item records and their photos consistent.

The item store owns the records, the file storage owns the blob bytes,
and this service is the only place that links or unlinks the two:

- a photo reference on an item always points at an existing blob,
- a blob belongs to at most one item,
- a blob that loses its item is removed by the operation that unlinked it.

Mutations of one item id are serialized with a per-id lock. The record
store and the blob medium share no transaction; when a blob cannot be
removed after its item was updated, the orphan is logged and left for an
out-of-band sweep instead of failing the request.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from domain.errors import NotFoundError, StorageError, ValidationError
from domain.models import Item, PhotoUpload
from repositories.base import ItemStore
from services.locks import KeyedLock
from storage.file_storage import FileStorage

logger = logging.getLogger(__name__)


def photo_url(item_id: int) -> str:
    return f"/inventory/{item_id}/photo"


class InventoryService:
    def __init__(self, items: ItemStore, assets: FileStorage):
        self.items = items
        self.assets = assets
        self._locks = KeyedLock()

    def _discard_blob(self, reference: Optional[str]) -> None:
        """Remove a blob that no item references any more."""
        if not reference:
            return
        try:
            self.assets.remove(reference)
        except StorageError:
            logger.warning("Orphaned photo %s could not be removed; leaving it for cleanup", reference)

    def register(
        self,
        name: Optional[str],
        description: Optional[str] = None,
        upload: Optional[PhotoUpload] = None,
    ) -> Item:
        """
        Create an item, storing its photo first when one was uploaded.

        If the record cannot be created the freshly written blob is removed
        before the error propagates.
        """
        if name is None or not name.strip():
            raise ValidationError("no inventory_name")

        photo_ref = None
        if upload is not None:
            photo_ref = self.assets.store(upload.data, upload.filename)

        try:
            item = self.items.create(name, description or "", photo_ref)
        except Exception:
            self._discard_blob(photo_ref)
            raise
        logger.info("Registered item %s (photo=%s)", item.id, item.photo_ref)
        return item

    def list_items(self) -> List[Item]:
        return self.items.list()

    def get_item(self, item_id: int) -> Item:
        return self.items.get(item_id)

    def update_metadata(
        self, item_id: int, name: Optional[str] = None, description: Optional[str] = None
    ) -> Item:
        if name is not None and not name.strip():
            raise ValidationError("inventory_name must not be empty")
        with self._locks.hold(item_id):
            return self.items.update(item_id, name=name, description=description)

    def replace_photo(self, item_id: int, upload: Optional[PhotoUpload]) -> Item:
        """
        Attach a new photo to an item and drop the previous one.

        Order: write the new blob, point the item at it, then remove the old
        blob. The item is never left without a readable photo.
        """
        with self._locks.hold(item_id):
            previous = self.items.get(item_id)
            if upload is None:
                raise ValidationError("no photo")
            new_ref = self.assets.store(upload.data, upload.filename)
            try:
                item = self.items.set_photo(item_id, new_ref)
            except Exception:
                self._discard_blob(new_ref)
                raise
            if previous.photo_ref and previous.photo_ref != new_ref:
                self._discard_blob(previous.photo_ref)

        logger.info("Replaced photo of item %s: %s -> %s", item_id, previous.photo_ref, new_ref)
        return item

    def photo_path(self, item_id: int) -> Path:
        try:
            item = self.items.get(item_id)
        except NotFoundError:
            raise NotFoundError("Photo not found") from None
        if not item.photo_ref:
            raise NotFoundError("Photo not found")
        return self.assets.resolve(item.photo_ref)

    def delete_item(self, item_id: int) -> Item:
        with self._locks.hold(item_id):
            removed = self.items.delete(item_id)
            self._discard_blob(removed.photo_ref)
        logger.info("Deleted item %s", item_id)
        return removed

    def search(self, item_id: Union[str, int, None], include_photo: bool = False) -> Dict[str, Any]:
        """Look an item up by a raw id value; optionally add its photo URL."""
        if item_id is None or (isinstance(item_id, str) and not item_id.strip()):
            raise ValidationError("no id")
        try:
            key = int(item_id)
        except (TypeError, ValueError):
            raise ValidationError("id must be an integer")

        item = self.items.get(key)
        record = item.to_dict()
        if include_photo and item.has_photo:
            record["photo_url"] = photo_url(item.id)
        return record
