"""Implementación SQL del repositorio de reservas."""

from datetime import timezone
from typing import Sequence

from sqlalchemy import delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.domain.entities.booking import Booking
from car_rental.domain.entities.car import Car
from car_rental.domain.entities.user import User
from car_rental.domain.value_objects.date_range import DateRange
from car_rental.domain.value_objects.driving_license import DrivingLicense
from car_rental.infrastructure.db.tables import bookings


class BookingRepoSQL(BookingRepo):
    """
    Implementación SQL del repositorio de reservas.

    Las filas guardan el snapshot de usuario y tarifas del momento de la
    reserva, de modo que la entidad se reconstruye sin depender del estado
    actual de users/cars.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, booking_id: str) -> Booking | None:
        result = await self._session.execute(select(bookings).where(bookings.c.id == booking_id))
        row = result.mappings().first()
        return self._row_to_entity(row) if row else None

    async def list_all(self) -> Sequence[Booking]:
        return await self._fetch(select(bookings))

    async def list_by_user(self, user_id: str) -> Sequence[Booking]:
        return await self._fetch(select(bookings).where(bookings.c.user_id == user_id))

    async def list_by_car(self, car_id: str) -> Sequence[Booking]:
        return await self._fetch(select(bookings).where(bookings.c.car_id == car_id))

    async def list_by_user_overlapping(
        self, user_id: str, date_range: DateRange
    ) -> Sequence[Booking]:
        stmt = select(bookings).where(bookings.c.user_id == user_id)
        return await self._fetch(self._overlapping(stmt, date_range))

    async def list_by_car_overlapping(
        self, car_id: str, date_range: DateRange
    ) -> Sequence[Booking]:
        stmt = select(bookings).where(bookings.c.car_id == car_id)
        return await self._fetch(self._overlapping(stmt, date_range))

    async def save(self, booking: Booking) -> None:
        values = {
            "id": booking.id,
            "user_id": booking.user.id,
            "user_name": booking.user.name,
            "user_email": booking.user.email,
            "license_number": booking.user.driving_license.license_number,
            "license_expiry_date": booking.user.driving_license.expiry_date,
            "car_id": booking.car.id,
            "car_brand": booking.car.brand,
            "car_model": booking.car.model,
            "car_stock": booking.car.stock,
            "peak_price": booking.car.peak_price,
            "mid_price": booking.car.mid_price,
            "off_price": booking.car.off_price,
            "start_date": booking.date_range.start_date,
            "end_date": booking.date_range.end_date,
            "total_price": booking.total_price,
            "created_at": booking.created_at,
        }
        await self._session.execute(insert(bookings).values(values))

    async def delete(self, booking_id: str) -> None:
        await self._session.execute(delete(bookings).where(bookings.c.id == booking_id))

    @staticmethod
    def _overlapping(stmt, date_range: DateRange):
        # intervalo cerrado: los extremos que se tocan cuentan
        return stmt.where(
            bookings.c.start_date <= date_range.end_date,
            bookings.c.end_date >= date_range.start_date,
        )

    async def _fetch(self, stmt) -> list[Booking]:
        result = await self._session.execute(stmt.order_by(bookings.c.created_at, bookings.c.id))
        return [self._row_to_entity(row) for row in result.mappings().all()]

    @staticmethod
    def _row_to_entity(row) -> Booking:
        created_at = row["created_at"]
        if created_at.tzinfo is None:
            # SQLite no conserva la zona horaria
            created_at = created_at.replace(tzinfo=timezone.utc)

        return Booking(
            id=row["id"],
            user=User(
                id=row["user_id"],
                name=row["user_name"],
                email=row["user_email"],
                driving_license=DrivingLicense(
                    license_number=row["license_number"],
                    expiry_date=row["license_expiry_date"],
                ),
            ),
            car=Car(
                id=row["car_id"],
                brand=row["car_brand"],
                model=row["car_model"],
                stock=row["car_stock"],
                peak_price=row["peak_price"],
                mid_price=row["mid_price"],
                off_price=row["off_price"],
            ),
            date_range=DateRange(start_date=row["start_date"], end_date=row["end_date"]),
            total_price=row["total_price"],
            created_at=created_at,
        )
