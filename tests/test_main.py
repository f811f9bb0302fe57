import pytest
from fastapi.testclient import TestClient

from products.handlers import ProductHandlers
from products.main import create_app
from products.store import InMemoryProductStore


@pytest.fixture
def client():
    return TestClient(create_app(ProductHandlers(InMemoryProductStore()), mount_mcp=False))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_crud_over_http(client, product_body):
    created = client.post("/products", json=product_body)
    assert created.status_code == 200
    assert created.headers["content-type"] == "application/json"
    pid = created.json()["productId"]

    assert client.get(f"/products/{pid}").json() == created.json()
    assert client.get("/products").json() == [created.json()]

    updated = client.put(f"/products/{pid}", json={**product_body, "available": False})
    assert updated.status_code == 200
    assert updated.json()["available"] is False

    deleted = client.delete(f"/products/{pid}")
    assert deleted.status_code == 204
    assert deleted.content == b""
    assert client.get(f"/products/{pid}").status_code == 404


def test_errors_pass_through(client):
    bad = client.post("/products", content="{", headers={"content-type": "application/json"})
    assert bad.status_code == 400
    assert "error" in bad.json()

    invalid = client.post("/products", json={"name": "x"})
    assert invalid.status_code == 400
    assert len(invalid.json()["errors"]) == 3

    missing = client.put("/products/ghost", json={})
    assert missing.status_code == 404
    assert missing.json() == {"error": "Product not found"}


def test_app_mounts_mcp():
    app = create_app(ProductHandlers(InMemoryProductStore()))
    assert any(getattr(route, "path", None) == "/mcp" for route in app.routes)


def test_invalid_utf8_body_is_malformed(client):
    response = client.post("/products", content=b"\xff\xfe{")
    assert response.status_code == 400
    assert response.json()["error"].startswith("Invalid request body format: ")


def test_out_of_range_price_over_http(client, product_body):
    raw = '{"name": "a", "description": "b", "price": 1e400, "available": true}'
    response = client.post("/products", content=raw, headers={"content-type": "application/json"})
    assert response.status_code == 400
    assert client.get("/products").json() == []
