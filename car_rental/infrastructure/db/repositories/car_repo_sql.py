"""Implementación SQL del repositorio de autos."""

from typing import Sequence

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.domain.entities.car import Car
from car_rental.domain.errors import OptimisticLockError
from car_rental.infrastructure.db.tables import cars


class CarRepoSQL(CarRepo):
    """
    Implementación SQL del repositorio de autos usando SQLAlchemy.

    save() es una escritura condicional sobre lock_version: si otra
    transacción modificó la fila desde que se leyó, lanza
    OptimisticLockError y el llamador debe volver a leer y reintentar.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, car_id: str) -> Car | None:
        stmt = select(cars).where(cars.c.id == car_id)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return self._row_to_entity(row)

    async def list_all(self) -> Sequence[Car]:
        result = await self._session.execute(select(cars).order_by(cars.c.brand, cars.c.model))
        return [self._row_to_entity(row) for row in result.mappings().all()]

    async def save(self, car: Car) -> None:
        values = {
            "brand": car.brand,
            "model": car.model,
            "stock": car.stock,
            "peak_price": car.peak_price,
            "mid_price": car.mid_price,
            "off_price": car.off_price,
            "lock_version": car.lock_version + 1,
        }
        stmt = (
            update(cars)
            .where(cars.c.id == car.id)
            .where(cars.c.lock_version == car.lock_version)
            .values(values)
        )
        result = await self._session.execute(stmt)

        if result.rowcount == 0:
            current = await self._session.execute(
                select(cars.c.lock_version).where(cars.c.id == car.id)
            )
            actual_version = current.scalar_one_or_none()
            if actual_version is not None:
                raise OptimisticLockError(car.id, car.lock_version, actual_version)
            await self._session.execute(insert(cars).values(id=car.id, **values))

        car.lock_version += 1

    @staticmethod
    def _row_to_entity(row) -> Car:
        return Car(
            id=row["id"],
            brand=row["brand"],
            model=row["model"],
            stock=row["stock"],
            peak_price=row["peak_price"],
            mid_price=row["mid_price"],
            off_price=row["off_price"],
            lock_version=row["lock_version"],
        )
