import pytest
from fastapi.testclient import TestClient

from fashion_shop.config import Settings
from fashion_shop.main import create_app


def test_health_ok(client):
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["db"] is True


def test_root_lists_endpoints(client):
    res = client.get("/")
    assert res.status_code == 200
    endpoints = res.json()["endpoints"]
    assert endpoints["addProduct"] == "POST /add-product"
    assert endpoints["ratingFilter"] == "GET /rating-filter"
    assert len(endpoints) == 6


@pytest.mark.parametrize("method,path", [("get", "/products"), ("post", "/season-totals"), ("get", "/add-product")])
def test_unknown_route_is_404(client, method, path):
    res = getattr(client, method)(path)
    assert res.status_code == 404
    body = res.json()
    assert body["error"] == "Endpoint not found"
    assert body["message"] == f"Route {path} does not exist"


def test_startup_fails_without_database(tmp_path):
    missing = tmp_path / "no-such-dir" / "fashion.db"
    app = create_app(Settings(DATABASE_URL=f"sqlite:///{missing}"))
    with pytest.raises(Exception):
        with TestClient(app):
            pass
