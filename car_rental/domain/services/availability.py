"""Cálculo de stock efectivo de un auto para un rango de fechas."""

from collections.abc import Iterable

from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car
from car_rental.domain.value_objects.date_range import DateRange


class AvailabilityService:
    """
    Stock efectivo = stock del auto - reservas del auto que se superponen.

    Cada reserva superpuesta consume una unidad, sin importar cuántos días
    se superpongan. El resultado nunca es negativo.
    """

    def overlapping(
        self,
        car: Car,
        requested_range: DateRange,
        bookings: Iterable[Booking],
    ) -> list[Booking]:
        """Filtra las reservas de este auto que se superponen con el rango."""
        return [
            booking
            for booking in bookings
            if booking.car_id == car.id and booking.overlaps(requested_range)
        ]

    def effective_stock(
        self,
        car: Car,
        requested_range: DateRange,
        overlapping_bookings: Iterable[Booking],
    ) -> int:
        overlapping = self.overlapping(car, requested_range, overlapping_bookings)
        return max(0, car.stock - len(overlapping))

    def is_available_for(
        self,
        car: Car,
        requested_range: DateRange,
        overlapping_bookings: Iterable[Booking],
    ) -> bool:
        return self.effective_stock(car, requested_range, overlapping_bookings) > 0
