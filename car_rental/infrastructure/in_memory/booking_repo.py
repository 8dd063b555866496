"""Implementación in-memory del repositorio de reservas."""

import copy
from typing import Iterable, Sequence

from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.domain.entities.booking import Booking
from car_rental.domain.value_objects.date_range import DateRange


class InMemoryBookingRepo(BookingRepo):
    """
    Repositorio de reservas en memoria, en orden de inserción.

    Booking es inmutable pero su snapshot de Car no: se guardan y se
    entregan copias.
    """

    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}

    def _copies(self, bookings: Iterable[Booking]) -> list[Booking]:
        return [copy.deepcopy(b) for b in bookings]

    async def get_by_id(self, booking_id: str) -> Booking | None:
        booking = self._bookings.get(booking_id)
        return copy.deepcopy(booking) if booking else None

    async def list_all(self) -> Sequence[Booking]:
        return self._copies(self._bookings.values())

    async def list_by_user(self, user_id: str) -> Sequence[Booking]:
        return self._copies(b for b in self._bookings.values() if b.user_id == user_id)

    async def list_by_car(self, car_id: str) -> Sequence[Booking]:
        return self._copies(b for b in self._bookings.values() if b.car_id == car_id)

    async def list_by_user_overlapping(
        self, user_id: str, date_range: DateRange
    ) -> Sequence[Booking]:
        return self._copies(
            b for b in self._bookings.values()
            if b.user_id == user_id and b.overlaps(date_range)
        )

    async def list_by_car_overlapping(
        self, car_id: str, date_range: DateRange
    ) -> Sequence[Booking]:
        return self._copies(
            b for b in self._bookings.values()
            if b.car_id == car_id and b.overlaps(date_range)
        )

    async def save(self, booking: Booking) -> None:
        self._bookings[booking.id] = copy.deepcopy(booking)

    async def delete(self, booking_id: str) -> None:
        self._bookings.pop(booking_id, None)

    def snapshot(self) -> dict[str, Booking]:
        return copy.deepcopy(self._bookings)

    def restore(self, state: dict[str, Booking]) -> None:
        self._bookings = state

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._bookings.clear()
