"""Puertos (interfaces) de la capa de aplicación."""

from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.application.interfaces.clock import Clock, FakeClock, SystemClock
from car_rental.application.interfaces.id_generator import (
    FakeIdGenerator,
    IdGenerator,
    RealIdGenerator,
)
from car_rental.application.interfaces.lock_manager import LockManager
from car_rental.application.interfaces.transaction_manager import TransactionManager
from car_rental.application.interfaces.user_repo import UserRepo

__all__ = [
    # Repositories
    "BookingRepo",
    "CarRepo",
    "UserRepo",
    # Services
    "Clock",
    "SystemClock",
    "FakeClock",
    "IdGenerator",
    "RealIdGenerator",
    "FakeIdGenerator",
    "LockManager",
    "TransactionManager",
]
