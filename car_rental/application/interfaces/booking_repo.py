"""Interface BookingRepo - Puerto de persistencia de reservas."""

from abc import ABC, abstractmethod
from typing import Sequence

from car_rental.domain.entities.booking import Booking
from car_rental.domain.value_objects.date_range import DateRange


class BookingRepo(ABC):
    @abstractmethod
    async def get_by_id(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> Sequence[Booking]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_user(self, user_id: str) -> Sequence[Booking]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_car(self, car_id: str) -> Sequence[Booking]:
        raise NotImplementedError

    @abstractmethod
    async def list_by_user_overlapping(
        self, user_id: str, date_range: DateRange
    ) -> Sequence[Booking]:
        """Reservas del usuario cuyo rango se superpone (intervalo cerrado)."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_car_overlapping(
        self, car_id: str, date_range: DateRange
    ) -> Sequence[Booking]:
        """Reservas del auto cuyo rango se superpone (intervalo cerrado)."""
        raise NotImplementedError

    @abstractmethod
    async def save(self, booking: Booking) -> None:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, booking_id: str) -> None:
        raise NotImplementedError
