"""
Item store contract shared by the SQL and in-memory backends.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from domain.models import Item


class ItemStore(ABC):
    """
    Keyed collection of item records.

    Ids are assigned on `create`, ascend in creation order and are never
    reused. Every lookup of an unknown id raises `NotFoundError`.
    """

    def init_schema(self) -> None:
        """Prepare the backend (create tables etc.). Safe to call repeatedly."""

    @abstractmethod
    def create(self, name: str, description: str = "", photo_ref: Optional[str] = None) -> Item:
        ...

    @abstractmethod
    def get(self, item_id: int) -> Item:
        ...

    @abstractmethod
    def list(self) -> List[Item]:
        """All items, ascending by id."""

    @abstractmethod
    def update(
        self, item_id: int, name: Optional[str] = None, description: Optional[str] = None
    ) -> Item:
        """Replace the given fields; `None` keeps the stored value. Never touches the photo."""

    @abstractmethod
    def set_photo(self, item_id: int, photo_ref: Optional[str]) -> Item:
        ...

    @abstractmethod
    def delete(self, item_id: int) -> Item:
        """Remove the record and return it so the caller can clean up its blob."""
