from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from fashion_shop.db import get_db
from fashion_shop.services.product_service import ProductService, ProductValidationError

router = APIRouter(tags=["products"])

FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def request_body(request: Request) -> dict:
    """
    Accept JSON objects and form posts; an empty body is an empty dict.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(FORM_TYPES):
        form = await request.form()
        return dict(form)
    try:
        payload = await request.json()
    except ValueError:
        raise ProductValidationError("Request body must be valid JSON")
    if not isinstance(payload, dict):
        raise ProductValidationError("Request body must be a JSON object")
    return payload


@router.post("/add-product", status_code=201, summary="Add a product")
def add_product(payload: dict = Depends(request_body), db: Session = Depends(get_db)):
    """
    payload: all product fields, e.g. { "Product Name": "Linen Shirt", "Season": "Summer", ... }
    """
    svc = ProductService(db)
    data = svc.add(payload)
    return {"message": "Product added successfully!", "data": data}


@router.post("/update-product", summary="Update a product by name")
def update_product(payload: dict = Depends(request_body), db: Session = Depends(get_db)):
    """
    payload: { "Product Name": "Linen Shirt", <fields to change> }
    """
    svc = ProductService(db)
    data = svc.update(payload)
    return {"message": "Product updated successfully!", "data": data}


@router.post("/delete-product", summary="Delete a product by name")
def delete_product(payload: dict = Depends(request_body), db: Session = Depends(get_db)):
    svc = ProductService(db)
    deleted = svc.delete(payload)
    return {"message": "Product deleted successfully!", "deleted": deleted}
