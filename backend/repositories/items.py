"""
Item repository backed by SQLAlchemy.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from db import init_db, make_session_factory
from domain.errors import NotFoundError, StorageError
from domain.models import Item
from repositories.base import ItemStore
from repositories.models import ItemORM

logger = logging.getLogger(__name__)


def _item_from_orm(orm: ItemORM) -> Item:
    return Item(
        id=orm.id,
        name=orm.inventory_name,
        description=orm.description or "",
        photo_ref=orm.photofile,
    )


class SqlItemStore(ItemStore):
    """CRUD operations for items, one session per call."""

    def __init__(self, engine: Engine):
        self._engine = engine
        self._session_factory = make_session_factory(engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as exc:
            session.rollback()
            logger.exception("Database error")
            raise StorageError("Database error") from exc
        finally:
            session.close()

    def _get_orm(self, session: Session, item_id: int) -> ItemORM:
        orm = session.get(ItemORM, item_id)
        if not orm:
            raise NotFoundError()
        return orm

    def init_schema(self) -> None:
        try:
            init_db(self._engine)
        except SQLAlchemyError as exc:
            raise StorageError("Database error") from exc

    def create(self, name: str, description: str = "", photo_ref: Optional[str] = None) -> Item:
        with self._session() as session:
            orm = ItemORM(inventory_name=name, description=description or "", photofile=photo_ref)
            session.add(orm)
            session.commit()
            session.refresh(orm)
            return _item_from_orm(orm)

    def get(self, item_id: int) -> Item:
        with self._session() as session:
            return _item_from_orm(self._get_orm(session, item_id))

    def list(self) -> List[Item]:
        with self._session() as session:
            items = session.query(ItemORM).order_by(ItemORM.id.asc()).all()
            return [_item_from_orm(i) for i in items]

    def update(
        self, item_id: int, name: Optional[str] = None, description: Optional[str] = None
    ) -> Item:
        with self._session() as session:
            orm = self._get_orm(session, item_id)
            if name is not None:
                orm.inventory_name = name
            if description is not None:
                orm.description = description
            session.commit()
            session.refresh(orm)
            return _item_from_orm(orm)

    def set_photo(self, item_id: int, photo_ref: Optional[str]) -> Item:
        with self._session() as session:
            orm = self._get_orm(session, item_id)
            orm.photofile = photo_ref
            session.commit()
            session.refresh(orm)
            return _item_from_orm(orm)

    def delete(self, item_id: int) -> Item:
        with self._session() as session:
            orm = self._get_orm(session, item_id)
            removed = _item_from_orm(orm)
            session.delete(orm)
            session.commit()
            return removed
