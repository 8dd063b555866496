"""Repositorios SQL."""

from car_rental.infrastructure.db.repositories.booking_repo_sql import BookingRepoSQL
from car_rental.infrastructure.db.repositories.car_repo_sql import CarRepoSQL
from car_rental.infrastructure.db.repositories.user_repo_sql import UserRepoSQL

__all__ = [
    "BookingRepoSQL",
    "CarRepoSQL",
    "UserRepoSQL",
]
