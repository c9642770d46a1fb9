# fashion_shop/schemas/product_schema.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from pydantic import ConfigDict

class ProductOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    product_category: str = Field(serialization_alias="Product Category")
    product_name: str = Field(serialization_alias="Product Name")
    units_sold: int = Field(serialization_alias="Units Sold")
    returns: int = Field(serialization_alias="Returns")
    revenue: float = Field(serialization_alias="Revenue")
    customer_rating: float = Field(serialization_alias="Customer Rating")
    stock_level: int = Field(serialization_alias="Stock Level")
    season: str = Field(serialization_alias="Season")
    trend_score: float = Field(serialization_alias="Trend Score")
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")


class SeasonTotalOut(BaseModel):
    season: str
    totalUnitsSold: float
    totalReturns: float
    totalRevenue: float


def product_to_dict(p) -> dict:
    return ProductOut.model_validate(p).model_dump(by_alias=True, mode="json")
