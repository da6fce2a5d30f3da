"""
Core domain models for the inventory catalog.
These are framework-agnostic and shared by the stores, the service and the API.
"""
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, Optional, Union


@dataclass
class Item:
    """
    An inventory record.

    `photo_ref` is the reference of the blob owned by this item in the
    asset store. It only changes through photo replacement; deleting the
    item also deletes the blob.
    """
    id: int
    name: str
    description: str = ""
    photo_ref: Optional[str] = None

    @property
    def has_photo(self) -> bool:
        return bool(self.photo_ref)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation (the column names of the items table)."""
        return {
            "id": self.id,
            "inventory_name": self.name,
            "description": self.description,
            "photoFile": self.photo_ref,
        }


@dataclass
class PhotoUpload:
    """An uploaded photo that has not been written to the asset store yet."""
    filename: str
    data: Union[bytes, BinaryIO]
