"""Entidad User - cliente que renta autos."""

from dataclasses import dataclass

from car_rental.domain.value_objects.date_range import DateRange
from car_rental.domain.value_objects.driving_license import DrivingLicense


@dataclass(frozen=True)
class User:
    """
    Cliente con su licencia de conducir.

    Attributes:
        id: Identificador del usuario.
        name: Nombre completo.
        email: Email (único en el sistema).
        driving_license: Licencia vigente del usuario.
    """

    id: str
    name: str
    email: str
    driving_license: DrivingLicense

    def can_drive_for(self, date_range: DateRange) -> bool:
        """Regla de negocio: la licencia debe cubrir todo el periodo de renta."""
        return self.driving_license.is_valid_for(date_range)
