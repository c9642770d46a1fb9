import operator
from typing import Any, Callable, Dict, List, Optional

from fashion_shop.models.product import FIELD_ATTRS, Product
from sqlalchemy import Float, cast, func
from sqlalchemy.orm import Session

# allow-listed comparison tokens for rating filters
COMPARISONS: Dict[str, Callable] = {
    "eq": operator.eq,
    "ne": operator.ne,
    "gt": operator.gt,
    "gte": operator.ge,
    "lt": operator.lt,
    "lte": operator.le,
}


def _as_number(column):
    return func.coalesce(cast(column, Float), 0)


class ProductRepository:
    collection = Product.__tablename__

    def __init__(self, db: Session):
        self.db = db

    def get_by_name(self, name: str) -> Optional[Product]:
        return self.db.query(Product).filter(Product.product_name == name).first()

    def create(self, data: Dict[str, Any]) -> Product:
        p = Product(**{FIELD_ATTRS[k]: v for k, v in data.items()})
        self.db.add(p)
        self.db.flush()
        return p

    def update_by_name(self, name: str, changes: Dict[str, Any]) -> Optional[Product]:
        p = self.get_by_name(name)
        if not p:
            return None
        for key, value in changes.items():
            setattr(p, FIELD_ATTRS[key], value)
        self.db.flush()
        return p

    def delete_by_name(self, name: str) -> Optional[Product]:
        p = self.get_by_name(name)
        if not p:
            return None
        self.db.delete(p)
        self.db.flush()
        return p

    def season_totals(self) -> List[Dict[str, Any]]:
        """
        Sum units sold, returns and revenue per season, ordered by season name.
        """
        rows = (
            self.db.query(
                Product.season,
                func.sum(_as_number(Product.units_sold)),
                func.sum(_as_number(Product.returns)),
                func.sum(_as_number(Product.revenue)),
            )
            .group_by(Product.season)
            .order_by(Product.season.asc())
            .all()
        )
        return [
            {
                "season": season,
                "totalUnitsSold": units or 0,
                "totalReturns": returns or 0,
                "totalRevenue": revenue or 0,
            }
            for season, units, returns, revenue in rows
        ]

    def top_by_units(self, season: str, min_units: float, limit: int = 10) -> List[Product]:
        units = _as_number(Product.units_sold)
        return (
            self.db.query(Product)
            .filter(Product.season == season, units > min_units)
            .order_by(units.desc(), Product.id)
            .limit(limit)
            .all()
        )

    def filter_by_rating(self, season: str, comparison: str, value: float) -> List[Product]:
        compare = COMPARISONS[comparison]
        rating = cast(Product.customer_rating, Float)
        return (
            self.db.query(Product)
            .filter(
                Product.season == season,
                Product.customer_rating.isnot(None),
                compare(rating, value),
            )
            .order_by(Product.id)
            .all()
        )
