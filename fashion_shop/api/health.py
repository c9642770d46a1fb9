from fastapi import APIRouter, Request

from fashion_shop.db import ping

router = APIRouter()

ENDPOINTS = {
    "addProduct": "POST /add-product",
    "updateProduct": "POST /update-product",
    "deleteProduct": "POST /delete-product",
    "seasonTotals": "GET /season-totals",
    "topProducts": "GET /top-products",
    "ratingFilter": "GET /rating-filter",
}


@router.get("/", tags=["health"])
def root():
    return {"message": "Fashion Shop API is running!", "endpoints": ENDPOINTS}


@router.get("/health", tags=["health"])
def health(request: Request):
    db_ok = ping(request.app.state.engine)
    return {"status": "ok" if db_ok else "degraded", "db": db_ok}
