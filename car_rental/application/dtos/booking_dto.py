"""DTOs de reservas."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from car_rental.domain.entities.booking import Booking


@dataclass
class CreateBookingDTO:
    """Datos de entrada para crear una reserva."""

    user_id: str
    car_id: str
    start_date: date
    end_date: date


@dataclass
class BookingDTO:
    """Reserva lista para exponer al exterior."""

    id: str
    user_id: str
    car_id: str
    car_brand: str
    car_model: str
    start_date: date
    end_date: date
    total_price: Decimal
    created_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> "BookingDTO":
        return cls(
            id=booking.id,
            user_id=booking.user_id,
            car_id=booking.car_id,
            car_brand=booking.car.brand,
            car_model=booking.car.model,
            start_date=booking.date_range.start_date,
            end_date=booking.date_range.end_date,
            total_price=booking.total_price,
            created_at=booking.created_at,
        )
