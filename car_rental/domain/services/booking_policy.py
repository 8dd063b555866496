"""
Política de creación y cancelación de reservas.

Orquesta las reglas de negocio sobre un snapshot consistente que provee el
llamador (usuario, auto y reservas existentes). No accede a repositorios:
la carga, el bloqueo y la persistencia son responsabilidad del caso de uso.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car
from car_rental.domain.entities.user import User
from car_rental.domain.errors import (
    CarNotFoundError,
    CarUnavailableError,
    DuplicateBookingError,
    LicenseInvalidError,
    UserNotFoundError,
)
from car_rental.domain.services.availability import AvailabilityService
from car_rental.domain.services.pricing import PricingEngine
from car_rental.domain.value_objects.date_range import DateRange

logger = logging.getLogger(__name__)


class AvailabilityMode(str, Enum):
    """Cómo se decide si hay unidades para reservar."""

    # stock menos reservas superpuestas del auto. Como crear una reserva ya
    # decrementa stock, una reserva vigente cuenta dos veces en rangos que
    # se superponen: con stock=2 sólo cabe una reserva por ventana.
    EFFECTIVE = "EFFECTIVE"
    # sólo stock > 0, sin mirar las fechas
    STOCK = "STOCK"


@dataclass(frozen=True)
class BookingRequest:
    user_id: str
    car_id: str
    date_range: DateRange


class BookingPolicy:
    """
    Reglas de creación de una reserva, evaluadas en orden:

    1. El usuario existe (UserNotFoundError).
    2. El auto existe (CarNotFoundError).
    3. El auto está disponible (CarUnavailableError).
    4. El usuario no tiene otra reserva superpuesta (DuplicateBookingError).
    5. La licencia cubre el rango (LicenseInvalidError).
    6. Se calcula el precio.
    7. Se construye la reserva.
    8. Se decrementa el stock del auto.

    La primera regla que falla corta la evaluación.
    """

    def __init__(
        self,
        pricing_engine: PricingEngine | None = None,
        availability_service: AvailabilityService | None = None,
        availability_mode: AvailabilityMode = AvailabilityMode.EFFECTIVE,
    ) -> None:
        self._pricing = pricing_engine or PricingEngine()
        self._availability = availability_service or AvailabilityService()
        self._mode = availability_mode

    @property
    def availability_mode(self) -> AvailabilityMode:
        return self._mode

    def create_booking(
        self,
        request: BookingRequest,
        user: User | None,
        car: Car | None,
        car_bookings: Sequence[Booking],
        user_bookings: Sequence[Booking],
        booking_id: str,
        created_at: datetime,
    ) -> Booking:
        """
        Valida las reglas y crea la reserva.

        Muta `car` (stock - 1) sólo si todas las reglas pasan; el llamador
        debe persistir la reserva y el auto en la misma unidad de trabajo.

        Args:
            request: Usuario, auto y rango solicitados.
            user: Usuario cargado, o None si no existe.
            car: Auto cargado, o None si no existe.
            car_bookings: Reservas del auto que se superponen con el rango.
            user_bookings: Reservas del usuario que se superponen con el rango.
            booking_id: Identificador nuevo para la reserva.
            created_at: Fecha/hora de creación.

        Returns:
            La reserva creada, con precio fijado.
        """
        date_range = request.date_range

        if user is None:
            raise UserNotFoundError(request.user_id)

        if car is None:
            raise CarNotFoundError(request.car_id)

        if not self._has_unit_available(car, date_range, car_bookings):
            raise CarUnavailableError(car.id, date_range)

        if any(booking.overlaps(date_range) for booking in user_bookings):
            raise DuplicateBookingError(user.id, date_range)

        if not user.can_drive_for(date_range):
            raise LicenseInvalidError(user.driving_license.license_number, date_range)

        quote = self._pricing.price_for_range(car, date_range)

        booking = Booking(
            id=booking_id,
            user=user,
            car=car.snapshot(),
            date_range=date_range,
            total_price=quote.total_price,
            created_at=created_at,
        )

        car.decrement_stock()

        logger.debug(
            "Reserva validada",
            extra={
                "booking_id": booking.id,
                "car_id": car.id,
                "user_id": user.id,
                "total_price": str(quote.total_price),
                "remaining_stock": car.stock,
            },
        )
        return booking

    def release(self, booking: Booking, car: Car | None) -> None:
        """Devuelve al inventario la unidad que consumía la reserva."""
        if car is None:
            logger.warning(
                "Auto de la reserva ya no existe; no se restaura stock",
                extra={"booking_id": booking.id, "car_id": booking.car_id},
            )
            return
        car.increment_stock()

    def _has_unit_available(
        self,
        car: Car,
        date_range: DateRange,
        car_bookings: Sequence[Booking],
    ) -> bool:
        if self._mode is AvailabilityMode.STOCK:
            return car.is_available()
        return self._availability.is_available_for(car, date_range, car_bookings)
