"""Value Objects del dominio de renta de autos."""

from car_rental.domain.value_objects.date_range import DateRange
from car_rental.domain.value_objects.driving_license import DrivingLicense
from car_rental.domain.value_objects.price_quote import PriceQuote

__all__ = [
    "DateRange",
    "DrivingLicense",
    "PriceQuote",
]
