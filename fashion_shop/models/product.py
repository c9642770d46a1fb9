from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Enum, Float, Integer, String

from fashion_shop.db import Base


SEASONS = ["Summer", "Winter", "Spring", "Autumn"]


class Product(Base):
    __tablename__ = "fashion_shop_data"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_category = Column(String(128), nullable=False)
    product_name = Column(String(256), unique=True, index=True, nullable=False)
    units_sold = Column(Integer, nullable=False, default=0)
    returns = Column(Integer, nullable=False, default=0)
    revenue = Column(Float, nullable=False, default=0)
    customer_rating = Column(Float, nullable=False)
    stock_level = Column(Integer, nullable=False, default=0)
    season = Column(
        Enum(*SEASONS, name="season", native_enum=False, create_constraint=True, length=16),
        nullable=False,
        index=True,
    )
    trend_score = Column(Float, nullable=False, default=0)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self):
        return f"<Product name={self.product_name} season={self.season}>"


# API field name -> Product attribute
FIELD_ATTRS = {
    "Product Category": "product_category",
    "Product Name": "product_name",
    "Units Sold": "units_sold",
    "Returns": "returns",
    "Revenue": "revenue",
    "Customer Rating": "customer_rating",
    "Stock Level": "stock_level",
    "Season": "season",
    "Trend Score": "trend_score",
}
