"""Data Transfer Objects de la capa de aplicación."""

from car_rental.application.dtos.booking_dto import BookingDTO, CreateBookingDTO
from car_rental.application.dtos.car_dto import AvailableCarDTO, CarDTO
from car_rental.application.dtos.user_dto import CreateUserDTO, UserDTO

__all__ = [
    "AvailableCarDTO",
    "BookingDTO",
    "CarDTO",
    "CreateBookingDTO",
    "CreateUserDTO",
    "UserDTO",
]
