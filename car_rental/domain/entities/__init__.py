"""Entidades del dominio de renta de autos."""

from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car
from car_rental.domain.entities.user import User

__all__ = [
    "Booking",
    "Car",
    "User",
]
