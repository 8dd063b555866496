"""Casos de uso del sistema de renta de autos."""

from car_rental.application.use_cases.cancel_booking import CancelBookingUseCase
from car_rental.application.use_cases.create_booking import CreateBookingUseCase
from car_rental.application.use_cases.get_available_cars import (
    GetAvailableCarsUseCase,
    GetQuoteUseCase,
)
from car_rental.application.use_cases.get_bookings import (
    GetAllBookingsUseCase,
    GetBookingsByCarIdUseCase,
    GetBookingsByUserIdUseCase,
)
from car_rental.application.use_cases.get_cars import GetAllCarsUseCase, GetCarByIdUseCase
from car_rental.application.use_cases.manage_users import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetAllUsersUseCase,
    GetUserUseCase,
)

__all__ = [
    "CancelBookingUseCase",
    "CreateBookingUseCase",
    "CreateUserUseCase",
    "DeleteUserUseCase",
    "GetAllBookingsUseCase",
    "GetAllCarsUseCase",
    "GetAllUsersUseCase",
    "GetAvailableCarsUseCase",
    "GetBookingsByCarIdUseCase",
    "GetBookingsByUserIdUseCase",
    "GetCarByIdUseCase",
    "GetQuoteUseCase",
    "GetUserUseCase",
]
