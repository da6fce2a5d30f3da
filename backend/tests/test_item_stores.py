"""Contract tests run against both item store backends."""
import pytest

from db import make_engine
from domain.errors import NotFoundError, StorageError
from repositories import InMemoryItemStore, SqlItemStore, build_item_store
from settings import Settings


def test_create_assigns_ascending_ids(item_store):
    a = item_store.create("Drill", "18V")
    b = item_store.create("Saw")

    assert (a.id, b.id) == (1, 2)
    assert b.description == ""
    assert b.photo_ref is None
    assert item_store.get(a.id).name == "Drill"


def test_list_is_ordered_by_id(item_store):
    for name in ("a", "b", "c", "d"):
        item_store.create(name)
    item_store.delete(2)
    item_store.create("e")

    ids = [i.id for i in item_store.list()]
    assert ids == sorted(ids)
    assert ids == [1, 3, 4, 5]


def test_ids_are_not_reused_after_deleting_last_item(item_store):
    first = item_store.create("a")
    item_store.delete(first.id)

    assert item_store.create("b").id == first.id + 1


def test_update_replaces_only_given_fields(item_store):
    item = item_store.create("Drill", "18V", "1_a.png")

    renamed = item_store.update(item.id, name="Hammer drill")
    assert renamed.name == "Hammer drill"
    assert renamed.description == "18V"
    assert renamed.photo_ref == "1_a.png"

    described = item_store.update(item.id, description="")
    assert described.name == "Hammer drill"
    assert described.description == ""


def test_set_photo_and_delete_return_records(item_store):
    item = item_store.create("Drill")

    assert item_store.set_photo(item.id, "1_a.png").photo_ref == "1_a.png"
    removed = item_store.delete(item.id)
    assert removed.photo_ref == "1_a.png"
    with pytest.raises(NotFoundError):
        item_store.get(item.id)


@pytest.mark.parametrize("op", ["get", "update", "set_photo", "delete"])
def test_unknown_id_raises_not_found(item_store, op):
    args = {"get": (42,), "update": (42, "x"), "set_photo": (42, "r"), "delete": (42,)}[op]
    with pytest.raises(NotFoundError):
        getattr(item_store, op)(*args)


def test_photo_reference_cannot_be_shared(item_store):
    item_store.create("a", photo_ref="1_a.png")
    other = item_store.create("b")

    with pytest.raises(StorageError):
        item_store.set_photo(other.id, "1_a.png")
    assert item_store.get(other.id).photo_ref is None


def test_memory_store_hands_out_copies():
    store = InMemoryItemStore()
    item = store.create("Drill")
    item.name = "changed"

    assert store.get(item.id).name == "Drill"


def test_sql_store_persists_across_instances(tmp_path):
    url = f"sqlite:///{tmp_path / 'items.db'}"
    store = SqlItemStore(make_engine(url))
    store.init_schema()
    store.create("Drill", "18V")

    reopened = SqlItemStore(make_engine(url))
    reopened.init_schema()
    assert [(i.id, i.name) for i in reopened.list()] == [(1, "Drill")]


def test_build_item_store_selects_backend(monkeypatch, tmp_path):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path / 'x.db'}")

    monkeypatch.setenv("ITEM_STORE", "memory")
    assert isinstance(build_item_store(Settings()), InMemoryItemStore)

    monkeypatch.setenv("ITEM_STORE", "sql")
    assert isinstance(build_item_store(Settings()), SqlItemStore)

    monkeypatch.setenv("ITEM_STORE", "redis")
    with pytest.raises(ValueError):
        build_item_store(Settings())
