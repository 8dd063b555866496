"""Entidad Booking - reserva con precio fijado de un auto por un usuario."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from car_rental.domain.entities.car import Car
from car_rental.domain.entities.user import User
from car_rental.domain.errors import LicenseInvalidError
from car_rental.domain.value_objects.date_range import DateRange


@dataclass(frozen=True)
class Booking:
    """
    Reserva inmutable.

    Guarda copias (snapshots) del usuario y del auto al momento de reservar:
    si después cambian las tarifas, el total_price de la reserva no cambia.
    Aun cuando se construya fuera de BookingPolicy, vuelve a validar que la
    licencia cubra el rango.
    """

    id: str
    user: User
    car: Car
    date_range: DateRange
    total_price: Decimal
    created_at: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.total_price, Decimal):
            object.__setattr__(self, "total_price", Decimal(str(self.total_price)))

        if not self.user.can_drive_for(self.date_range):
            raise LicenseInvalidError(
                self.user.driving_license.license_number, self.date_range
            )

    @property
    def user_id(self) -> str:
        return self.user.id

    @property
    def car_id(self) -> str:
        return self.car.id

    def overlaps(self, date_range: DateRange) -> bool:
        return self.date_range.overlaps(date_range)
