"""Value Object DrivingLicense - licencia de conducir de un usuario."""

from dataclasses import dataclass
from datetime import date

from car_rental.domain.value_objects.date_range import DateRange


@dataclass(frozen=True)
class DrivingLicense:
    """
    Licencia de conducir.

    La licencia es válida en una fecha sólo si vence estrictamente después
    de ella: una licencia que vence el mismo día NO cubre ese día.

    Attributes:
        license_number: Número de licencia.
        expiry_date: Fecha de vencimiento.
    """

    license_number: str
    expiry_date: date

    def __post_init__(self) -> None:
        if not self.license_number or not self.license_number.strip():
            raise ValueError("license_number no puede estar vacío")

    def is_valid(self, on_date: date) -> bool:
        """Verifica si la licencia sigue vigente en la fecha de referencia."""
        return self.expiry_date > on_date

    def is_valid_for(self, date_range: DateRange) -> bool:
        """Verifica si la licencia cubre todo el rango (hasta end_date)."""
        return self.expiry_date > date_range.end_date
