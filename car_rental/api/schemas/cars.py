from decimal import Decimal

from pydantic import BaseModel


class CarResponse(BaseModel):
    id: str
    brand: str
    model: str
    stock: int
    peak_price: Decimal
    mid_price: Decimal
    off_price: Decimal


class AvailableCarResponse(BaseModel):
    id: str
    brand: str
    model: str
    effective_stock: int
    total_price: Decimal
    average_daily_price: Decimal
    day_count: int
