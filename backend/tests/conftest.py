import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

from db import make_engine
from repositories import InMemoryItemStore, SqlItemStore
from services.inventory import InventoryService
from storage.file_storage import FileStorage


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path / "uploads")


def _sql_store(tmp_path):
    store = SqlItemStore(make_engine(f"sqlite:///{tmp_path / 'items.db'}"))
    store.init_schema()
    return store


@pytest.fixture(params=["memory", "sql"])
def item_store(request, tmp_path):
    if request.param == "memory":
        return InMemoryItemStore()
    return _sql_store(tmp_path)


@pytest.fixture
def inventory(item_store, storage):
    return InventoryService(items=item_store, assets=storage)