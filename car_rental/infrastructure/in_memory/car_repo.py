"""Implementación in-memory del repositorio de autos."""

import copy
from typing import Sequence

from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.domain.entities.car import Car
from car_rental.domain.errors import OptimisticLockError


class InMemoryCarRepo(CarRepo):
    """
    Repositorio de autos en memoria.

    Guarda y entrega copias: una mutación de stock no es visible para
    otros lectores hasta que se llama a save(). Igual que la implementación
    SQL, rechaza un save() hecho sobre una versión desactualizada.
    """

    def __init__(self) -> None:
        self._cars: dict[str, Car] = {}

    async def get_by_id(self, car_id: str) -> Car | None:
        car = self._cars.get(car_id)
        return copy.deepcopy(car) if car else None

    async def list_all(self) -> Sequence[Car]:
        return [copy.deepcopy(car) for car in self._cars.values()]

    async def save(self, car: Car) -> None:
        current = self._cars.get(car.id)
        if current is not None and current.lock_version != car.lock_version:
            raise OptimisticLockError(car.id, car.lock_version, current.lock_version)

        stored = copy.deepcopy(car)
        stored.lock_version = car.lock_version + 1
        self._cars[car.id] = stored
        car.lock_version = stored.lock_version

    def snapshot(self) -> dict[str, Car]:
        return copy.deepcopy(self._cars)

    def restore(self, state: dict[str, Car]) -> None:
        self._cars = state

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._cars.clear()
