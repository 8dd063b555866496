"""Entidad Car - modelo de auto rentable con stock y tarifas por temporada."""

import copy
from dataclasses import dataclass
from decimal import Decimal

from car_rental.domain.errors import StockExhaustedError
from car_rental.domain.season import Season


@dataclass
class Car:
    """
    Modelo de auto del catálogo.

    El stock es el número de unidades libres; lo decrementa la creación de
    una reserva y lo incrementa su cancelación. Nunca es negativo.

    Attributes:
        id: Identificador del auto.
        brand: Marca.
        model: Modelo.
        stock: Unidades disponibles (>= 0).
        peak_price: Tarifa diaria en temporada alta.
        mid_price: Tarifa diaria en temporada media.
        off_price: Tarifa diaria en temporada baja.
        lock_version: Versión para control de concurrencia optimista.
    """

    id: str
    brand: str
    model: str
    stock: int
    peak_price: Decimal
    mid_price: Decimal
    off_price: Decimal
    lock_version: int = 0

    def __post_init__(self) -> None:
        for name in ("peak_price", "mid_price", "off_price"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                value = Decimal(str(value))
                setattr(self, name, value)
            if value <= 0:
                raise ValueError(f"{name} debe ser positivo: {value}")

        if self.stock < 0:
            raise ValueError(f"stock no puede ser negativo: {self.stock}")

    def is_available(self) -> bool:
        return self.stock > 0

    def decrement_stock(self) -> None:
        """Consume una unidad; falla si ya no quedan."""
        if self.stock <= 0:
            raise StockExhaustedError(self.id)
        self.stock -= 1

    def increment_stock(self) -> None:
        """Devuelve una unidad al inventario."""
        self.stock += 1

    def rate_for(self, season: Season) -> Decimal:
        """Retorna la tarifa diaria del auto para una temporada."""
        if season is Season.PEAK:
            return self.peak_price
        if season is Season.MID:
            return self.mid_price
        return self.off_price

    def snapshot(self) -> "Car":
        """Copia independiente del estado actual (para fijar precios en una reserva)."""
        return copy.copy(self)

    def __str__(self) -> str:
        return f"{self.brand} {self.model} ({self.id})"
