from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from fashion_shop.db import get_db
from fashion_shop.services.report_service import ReportService

router = APIRouter(tags=["reports"])


@router.get("/season-totals", summary="Units sold, returns and revenue per season")
def season_totals(db: Session = Depends(get_db)):
    results = ReportService(db).season_totals()
    return {"message": "Season totals calculated successfully", "results": results}


@router.get("/top-products", summary="Top 10 products of a season above a units threshold")
def top_products(
    season: Optional[str] = Query(None),
    min_units: Optional[str] = Query(None, alias="minUnits"),
    db: Session = Depends(get_db),
):
    results = ReportService(db).top_products(season, min_units)
    return {"message": "Top 10 products fetched successfully", "results": results}


@router.get("/rating-filter", summary="Products of a season matching a rating condition")
def rating_filter(
    season: Optional[str] = Query(None),
    operator: Optional[str] = Query(None, description="eq, ne, gt, gte, lt or lte"),
    value: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    results = ReportService(db).rating_filter(season, operator, value)
    return {"message": "Filtered products fetched successfully", "results": results}
