import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from api.main import create_app
from domain.errors import StorageError
from repositories import InMemoryItemStore
from services.inventory import InventoryService
from storage.file_storage import FileStorage


@pytest.fixture
def service(tmp_path):
    return InventoryService(items=InMemoryItemStore(), assets=FileStorage(tmp_path / "uploads"))


@pytest.fixture
def client(service):
    with TestClient(create_app(inventory=service)) as c:
        yield c


def _register(client, name="Drill", description="18V", photo=None):
    files = {"photo": photo} if photo else None
    data = {"description": description}
    if name is not None:
        data["inventory_name"] = name
    return client.post("/register", data=data, files=files)


def test_drill_scenario_register_attach_photo_delete(client, service):
    resp = _register(client)
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "inventory_name": "Drill", "description": "18V", "photoFile": None}

    resp = client.put("/inventory/1/photo", files={"photo": ("a.png", b"\x89PNG-data", "image/png")})
    assert resp.status_code == 200
    ref = resp.json()["photoFile"]
    assert ref.endswith("_a.png")
    assert service.assets.exists(ref)

    resp = client.delete("/inventory/1")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Deleted"}
    assert not service.assets.exists(ref)
    assert client.get("/inventory/1").status_code == 404


def test_register_requires_name(client, service):
    resp = _register(client, name=None, photo=("a.png", b"data", "image/png"))
    assert resp.status_code == 400
    assert resp.json() == {"error": "no inventory_name"}
    assert list(service.assets.root.iterdir()) == []

    assert _register(client, name="").status_code == 400


def test_register_with_photo_and_fetch_it(client):
    created = _register(client, photo=("drill shot.jpg", b"jpeg-bytes", "image/jpeg")).json()
    assert created["photoFile"].endswith("_drill_shot.jpg")

    resp = client.get(f"/inventory/{created['id']}/photo")
    assert resp.status_code == 200
    assert resp.content == b"jpeg-bytes"
    assert resp.headers["content-type"].startswith("image/jpeg")


def test_storage_failure_maps_to_500(client, service):
    with patch.object(service.items, "create", side_effect=StorageError("Database error")):
        resp = _register(client)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Storage error"}


def test_list_inventory_in_id_order(client):
    for name in ("a", "b", "c"):
        _register(client, name=name)
    client.delete("/inventory/2")

    resp = client.get("/inventory")
    assert resp.status_code == 200
    assert [i["id"] for i in resp.json()] == [1, 3]


def test_update_item_partial_fields(client):
    _register(client, photo=("a.png", b"x", "image/png"))
    before = client.get("/inventory/1").json()

    resp = client.put("/inventory/1", json={"description": "20V"})
    assert resp.status_code == 200
    assert resp.json() == {**before, "description": "20V"}

    resp = client.put("/inventory/1", json={"inventory_name": "Impact drill"})
    assert resp.json()["inventory_name"] == "Impact drill"
    assert resp.json()["description"] == "20V"


def test_update_unknown_item_is_404(client):
    resp = client.put("/inventory/7", json={"inventory_name": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}


def test_update_blank_name_is_400(client):
    _register(client)
    assert client.put("/inventory/1", json={"inventory_name": ""}).status_code == 400


def test_photo_missing_cases_are_404(client, service):
    _register(client)
    resp = client.get("/inventory/1/photo")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Photo not found"}

    created = _register(client, photo=("a.png", b"x", "image/png")).json()
    service.assets.remove(created["photoFile"])
    resp = client.get(f"/inventory/{created['id']}/photo")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Photo file missing"}


def test_replace_photo_unknown_item_discards_upload(client, service):
    resp = client.put("/inventory/9/photo", files={"photo": ("a.png", b"x", "image/png")})
    assert resp.status_code == 404
    assert list(service.assets.root.iterdir()) == []


def test_replace_photo_without_file_is_400(client):
    _register(client)
    assert client.put("/inventory/1/photo").status_code == 400


def test_replace_photo_deletes_previous_blob(client, service):
    first = _register(client, photo=("a.png", b"a", "image/png")).json()["photoFile"]
    second = client.put("/inventory/1/photo", files={"photo": ("b.png", b"b", "image/png")}).json()["photoFile"]

    assert sorted(p.name for p in service.assets.root.iterdir()) == [second]
    assert not service.assets.exists(first)


def test_delete_unknown_item_is_404(client):
    assert client.delete("/inventory/3").status_code == 404


def test_non_integer_id_is_400(client):
    assert client.get("/inventory/abc").status_code == 400


def test_unmatched_routes_are_405(client):
    resp = client.get("/nowhere")
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}

    resp = client.patch("/inventory/1")
    assert resp.status_code == 405
    assert resp.json() == {"error": "Method not allowed"}


def test_forms_and_health_are_served(client):
    for page in ("/RegisterForm.html", "/SearchForm.html"):
        resp = client.get(page)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "<form" in resp.text
    assert client.get("/health").json() == {"status": "healthy"}


def test_replace_photo_unknown_item_without_file_is_404(client):
    resp = client.put("/inventory/99/photo")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not found"}
