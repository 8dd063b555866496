"""DTOs de autos y cotizaciones."""

from dataclasses import dataclass
from decimal import Decimal

from car_rental.domain.entities.car import Car
from car_rental.domain.value_objects.price_quote import PriceQuote


@dataclass
class CarDTO:
    id: str
    brand: str
    model: str
    stock: int
    peak_price: Decimal
    mid_price: Decimal
    off_price: Decimal

    @classmethod
    def from_entity(cls, car: Car) -> "CarDTO":
        return cls(
            id=car.id,
            brand=car.brand,
            model=car.model,
            stock=car.stock,
            peak_price=car.peak_price,
            mid_price=car.mid_price,
            off_price=car.off_price,
        )


@dataclass
class AvailableCarDTO:
    """Auto disponible para un rango, con su cotización."""

    id: str
    brand: str
    model: str
    effective_stock: int
    total_price: Decimal
    average_daily_price: Decimal
    day_count: int

    @classmethod
    def from_quote(cls, car: Car, quote: PriceQuote, effective_stock: int) -> "AvailableCarDTO":
        return cls(
            id=car.id,
            brand=car.brand,
            model=car.model,
            effective_stock=effective_stock,
            total_price=quote.total_price,
            average_daily_price=quote.average_daily_price,
            day_count=quote.day_count,
        )
