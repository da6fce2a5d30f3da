"""
SQLAlchemy ORM models for persistence.
"""
from sqlalchemy import Column, Integer, String, Text

from db import Base


class ItemORM(Base):
    __tablename__ = "items"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    inventory_name = Column(Text, nullable=False)
    description = Column(Text, nullable=False, default="")
    photofile = Column(String, nullable=True, unique=True)
