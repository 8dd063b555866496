"""Interface CarRepo - Puerto de persistencia de autos."""

from abc import ABC, abstractmethod
from typing import Sequence

from car_rental.domain.entities.car import Car


class CarRepo(ABC):
    @abstractmethod
    async def get_by_id(self, car_id: str) -> Car | None:
        """Retorna el auto o None si no existe."""
        raise NotImplementedError

    @abstractmethod
    async def list_all(self) -> Sequence[Car]:
        raise NotImplementedError

    @abstractmethod
    async def save(self, car: Car) -> None:
        """
        Inserta o actualiza el auto.

        Las implementaciones con control de concurrencia comparan
        car.lock_version contra la versión persistida y lanzan
        OptimisticLockError si difieren.
        """
        raise NotImplementedError
