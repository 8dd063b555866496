"""Servicios de dominio: precios, disponibilidad y política de reservas."""

from car_rental.domain.services.availability import AvailabilityService
from car_rental.domain.services.booking_policy import (
    AvailabilityMode,
    BookingPolicy,
    BookingRequest,
)
from car_rental.domain.services.pricing import PricingEngine, round_money

__all__ = [
    "AvailabilityMode",
    "AvailabilityService",
    "BookingPolicy",
    "BookingRequest",
    "PricingEngine",
    "round_money",
]
