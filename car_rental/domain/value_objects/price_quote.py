"""Value Object PriceQuote - cotización de una renta."""

from dataclasses import dataclass, field
from decimal import Decimal

from car_rental.domain.season import Season


@dataclass(frozen=True)
class PriceQuote:
    """
    Resultado del cálculo de precio para un rango.

    Attributes:
        total_price: Suma de la tarifa de cada día, redondeada a 2 decimales.
        average_daily_price: total / day_count, redondeado a 2 decimales.
        day_count: Días de renta (extremos incluidos).
        days_by_season: Cuántos días cayeron en cada temporada.
    """

    total_price: Decimal
    average_daily_price: Decimal
    day_count: int
    days_by_season: dict[Season, int] = field(default_factory=dict, compare=False)
