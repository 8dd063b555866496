"""Value Object DateRange - intervalo cerrado de fechas de una renta."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from car_rental.domain.errors import InvalidRangeError


def _to_date(value: date) -> date:
    # datetime es subclase de date: se trunca al inicio del día
    if isinstance(value, datetime):
        return value.date()
    return value


@dataclass(frozen=True)
class DateRange:
    """
    Value Object inmutable que representa un rango de fechas inclusivo.

    Ambos extremos cuentan como días de renta: si start_date == end_date
    la renta es de un día.

    Attributes:
        start_date: Primer día de la renta.
        end_date: Último día de la renta.
    """

    start_date: date
    end_date: date

    def __post_init__(self) -> None:
        object.__setattr__(self, "start_date", _to_date(self.start_date))
        object.__setattr__(self, "end_date", _to_date(self.end_date))

        if self.start_date > self.end_date:
            raise InvalidRangeError(
                f"La fecha de inicio no puede ser posterior a la de fin: "
                f"{self.start_date} > {self.end_date}"
            )

    def contains(self, day: date) -> bool:
        """Verifica si una fecha está dentro del rango (extremos incluidos)."""
        return self.start_date <= _to_date(day) <= self.end_date

    def overlaps(self, other: "DateRange") -> bool:
        """
        Verifica si este rango se superpone con otro.

        Semántica de intervalo cerrado: rangos que sólo se tocan en un
        extremo (self.end_date == other.start_date) SÍ se superponen, porque
        ese día el auto está ocupado por ambas rentas.
        """
        return self.start_date <= other.end_date and self.end_date >= other.start_date

    def get_days(self) -> int:
        """Número de días de renta, contando ambos extremos."""
        return (self.end_date - self.start_date).days + 1

    def iter_days(self) -> Iterator[date]:
        """Itera cada día calendario del rango, en orden."""
        # por desplazamiento: no se calcula el día siguiente a date.max
        for offset in range(self.get_days()):
            yield self.start_date + timedelta(days=offset)

    def __str__(self) -> str:
        return f"{self.start_date.isoformat()} -> {self.end_date.isoformat()}"

    @classmethod
    def from_strings(cls, start: str, end: str) -> "DateRange":
        """Factory method para crear desde fechas ISO (YYYY-MM-DD)."""
        try:
            start_date = date.fromisoformat(start.strip()[:10])
            end_date = date.fromisoformat(end.strip()[:10])
        except (AttributeError, ValueError) as exc:
            raise InvalidRangeError(
                f"Formato de fecha inválido, se espera YYYY-MM-DD: {start!r}, {end!r}"
            ) from exc
        return cls(start_date=start_date, end_date=end_date)
