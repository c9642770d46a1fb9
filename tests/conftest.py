import pytest
from fastapi.testclient import TestClient

from fashion_shop.config import Settings
from fashion_shop.main import create_app


def make_product(name, **overrides):
    """Request body for /add-product; values are strings like a form post would send."""
    body = {
        "Product Category": "Tops",
        "Product Name": name,
        "Units Sold": "120",
        "Returns": "4",
        "Revenue": "2400.5",
        "Customer Rating": "4.5",
        "Stock Level": "30",
        "Season": "Summer",
        "Trend Score": "87",
    }
    body.update({k: v for k, v in overrides.items()})
    return body


@pytest.fixture
def app(tmp_path):
    # fresh database file per test
    settings = Settings(DATABASE_URL=f"sqlite:///{tmp_path / 'fashion_test.db'}")
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db(client, app):
    s = app.state.session_factory()
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def add(client):
    def _add(name, **overrides):
        res = client.post("/add-product", json=make_product(name, **overrides))
        assert res.status_code == 201, res.json()
        return res.json()["data"]

    return _add
