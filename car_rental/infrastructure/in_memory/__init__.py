"""Adaptadores in-memory (desarrollo y testing)."""

from car_rental.infrastructure.in_memory.booking_repo import InMemoryBookingRepo
from car_rental.infrastructure.in_memory.car_repo import InMemoryCarRepo
from car_rental.infrastructure.in_memory.lock_manager import KeyedLockManager
from car_rental.infrastructure.in_memory.transaction_manager import InMemoryTransactionManager
from car_rental.infrastructure.in_memory.user_repo import InMemoryUserRepo

__all__ = [
    "InMemoryBookingRepo",
    "InMemoryCarRepo",
    "InMemoryTransactionManager",
    "InMemoryUserRepo",
    "KeyedLockManager",
]
