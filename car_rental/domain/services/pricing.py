"""Motor de precios por temporada."""

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal

from car_rental.domain.entities.car import Car
from car_rental.domain.season import Season, SeasonCalendar
from car_rental.domain.value_objects.date_range import DateRange
from car_rental.domain.value_objects.price_quote import PriceQuote

CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Redondeo monetario del sistema: 2 decimales, ROUND_HALF_UP."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class PricingEngine:
    """
    Calcula el precio de una renta sumando la tarifa de cada día.

    Cada día del rango (extremos incluidos) se cobra con la tarifa de la
    temporada a la que pertenece. El redondeo se aplica una sola vez al
    total y una vez al promedio, nunca por día.
    """

    def __init__(self, calendar: type[SeasonCalendar] = SeasonCalendar) -> None:
        self._calendar = calendar

    def price_for_range(self, car: Car, date_range: DateRange) -> PriceQuote:
        total = Decimal("0")
        days_by_season: Counter[Season] = Counter()

        for day in date_range.iter_days():
            season = self._calendar.get_season(day)
            total += car.rate_for(season)
            days_by_season[season] += 1

        day_count = sum(days_by_season.values())
        return PriceQuote(
            total_price=round_money(total),
            average_daily_price=round_money(total / day_count),
            day_count=day_count,
            days_by_season=dict(days_by_season),
        )
