import logging
import math
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from fashion_shop.repositories.product_repo import COMPARISONS, ProductRepository
from fashion_shop.schemas.product_schema import SeasonTotalOut, product_to_dict
from fashion_shop.services.product_service import ProductValidationError, StorageError

log = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10


def parse_number(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


class ReportService:
    """Read-only aggregations over the product collection."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def season_totals(self) -> List[Dict[str, Any]]:
        try:
            rows = self.repo.season_totals()
        except SQLAlchemyError as e:
            log.error("season totals over %s failed", self.repo.collection, exc_info=True)
            raise StorageError(str(e))
        return [SeasonTotalOut(**r).model_dump() for r in rows]

    def top_products(self, season: Optional[str], min_units: Optional[str]) -> List[Dict[str, Any]]:
        threshold = parse_number(min_units)
        if not season or threshold is None:
            raise ProductValidationError("season and minUnits query parameters are required")
        try:
            products = self.repo.top_by_units(season, threshold, limit=TOP_PRODUCTS_LIMIT)
        except SQLAlchemyError as e:
            log.error("top products over %s failed", self.repo.collection, exc_info=True)
            raise StorageError(str(e))
        return [product_to_dict(p) for p in products]

    def rating_filter(
        self, season: Optional[str], comparison: Optional[str], value: Optional[str]
    ) -> List[Dict[str, Any]]:
        if not season or not comparison or not value:
            raise ProductValidationError(
                "season, operator, and value query parameters are required",
                example="/rating-filter?season=Summer&operator=gt&value=4",
            )
        if comparison not in COMPARISONS:
            raise ProductValidationError(
                f"operator must be one of: {', '.join(COMPARISONS)}"
            )
        rating = parse_number(value)
        if rating is None:
            raise ProductValidationError("value must be a number")
        try:
            products = self.repo.filter_by_rating(season, comparison, rating)
        except SQLAlchemyError as e:
            log.error("rating filter over %s failed", self.repo.collection, exc_info=True)
            raise StorageError(str(e))
        return [product_to_dict(p) for p in products]
