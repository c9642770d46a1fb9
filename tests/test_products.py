import pytest

from fashion_shop.models.product import Product
from tests.conftest import make_product


def test_add_product(client):
    res = client.post("/add-product", json=make_product("Linen Shirt"))
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "Product added successfully!"
    data = body["data"]
    assert data["Product Name"] == "Linen Shirt"
    assert data["Units Sold"] == 120
    assert data["Revenue"] == 2400.5
    assert data["Season"] == "Summer"
    assert data["createdAt"] and data["updatedAt"]


def test_add_product_from_form_body(client):
    res = client.post("/add-product", data=make_product("Wool Coat", Season="Winter"))
    assert res.status_code == 201
    assert res.json()["data"]["Season"] == "Winter"


def test_duplicate_name_rejected(client, db):
    assert client.post("/add-product", json=make_product("Linen Shirt")).status_code == 201
    res = client.post("/add-product", json=make_product("Linen Shirt", **{"Units Sold": "5"}))
    assert res.status_code == 400
    assert res.json()["error"] == "Duplicate product name"
    assert db.query(Product).filter(Product.product_name == "Linen Shirt").count() == 1


@pytest.mark.parametrize("rating,status", [("0", 400), ("6", 400), ("1", 201), ("5", 201)])
def test_add_rating_boundaries(client, rating, status):
    res = client.post("/add-product", json=make_product(f"Rated {rating}", **{"Customer Rating": rating}))
    assert res.status_code == status


@pytest.mark.parametrize("score,status", [("-1", 400), ("101", 400), ("0", 201), ("100", 201)])
def test_add_trend_score_boundaries(client, score, status):
    res = client.post("/add-product", json=make_product(f"Trend {score}", **{"Trend Score": score}))
    assert res.status_code == status


def test_add_validation_errors_listed(client, db):
    res = client.post("/add-product", json=make_product("", **{"Stock Level": "-2"}))
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Validation failed"
    assert [e["field"] for e in body["errors"]] == ["Product Name", "Stock Level"]
    assert db.query(Product).count() == 0


def test_add_rejects_malformed_json(client):
    res = client.post("/add-product", content=b"{not json", headers={"content-type": "application/json"})
    assert res.status_code == 400


def test_add_rejects_non_object_json(client):
    res = client.post("/add-product", json=["Linen Shirt"])
    assert res.status_code == 400


def test_add_rejects_undecodable_form_body(client, db):
    res = client.post(
        "/add-product",
        content=b"Product%20Name=\xff\xfe&Season=Summer",
        headers={"content-type": "application/x-www-form-urlencoded"},
    )
    assert res.status_code == 400
    assert db.query(Product).count() == 0


def test_add_rejects_undecodable_json_body(client):
    res = client.post("/add-product", content=b"\xff\xfe{}", headers={"content-type": "application/json"})
    assert res.status_code == 400
    assert res.json()["message"] == "Request body must be valid JSON"


def test_add_rejects_oversized_counts(client, db):
    res = client.post("/add-product", json=make_product("Linen Shirt", **{"Units Sold": "1e20"}))
    assert res.status_code == 400
    assert [e["field"] for e in res.json()["errors"]] == ["Units Sold"]
    assert db.query(Product).count() == 0


def test_update_product_changes_only_given_fields(client, db, add):
    before = add("Linen Shirt")
    res = client.post("/update-product", json={"Product Name": "Linen Shirt", "Units Sold": "200", "Stock Level": 3})
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["Units Sold"] == 200
    assert data["Stock Level"] == 3
    assert data["Revenue"] == before["Revenue"]
    assert data["Season"] == before["Season"]

    p = db.query(Product).filter(Product.product_name == "Linen Shirt").first()
    assert p.units_sold == 200
    assert p.customer_rating == 4.5


def test_update_missing_product_is_404(client):
    res = client.post("/update-product", json={"Product Name": "Ghost", "Units Sold": "1"})
    assert res.status_code == 404
    assert res.json()["message"] == "Product not found!"


def test_update_requires_name(client):
    res = client.post("/update-product", json={"Units Sold": "1"})
    assert res.status_code == 400
    assert res.json()["message"] == "Product Name is required"


def test_update_rejects_invalid_fields(client, db, add):
    add("Linen Shirt")
    res = client.post("/update-product", json={"Product Name": "Linen Shirt", "Customer Rating": "11"})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "Customer Rating"
    p = db.query(Product).filter(Product.product_name == "Linen Shirt").first()
    assert p.customer_rating == 4.5


def test_delete_product(client, db, add):
    add("Linen Shirt")
    res = client.post("/delete-product", json={"Product Name": "Linen Shirt"})
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Product deleted successfully!"
    assert body["deleted"]["Product Name"] == "Linen Shirt"

    assert db.query(Product).filter(Product.product_name == "Linen Shirt").first() is None
    again = client.post("/delete-product", json={"Product Name": "Linen Shirt"})
    assert again.status_code == 404


def test_delete_missing_product_is_404(client):
    res = client.post("/delete-product", json={"Product Name": "Ghost"})
    assert res.status_code == 404


def test_delete_requires_name(client):
    res = client.post("/delete-product", json={})
    assert res.status_code == 400


def test_update_rejects_oversized_counts(client, db, add):
    add("Linen Shirt")
    res = client.post("/update-product", json={"Product Name": "Linen Shirt", "Stock Level": 1e19})
    assert res.status_code == 400
    assert res.json()["errors"][0]["field"] == "Stock Level"
    p = db.query(Product).filter(Product.product_name == "Linen Shirt").first()
    assert p.stock_level == 30
