"""DTOs de usuarios."""

from dataclasses import dataclass
from datetime import date

from car_rental.domain.entities.user import User


@dataclass
class CreateUserDTO:
    name: str
    email: str
    license_number: str
    license_expiry_date: date


@dataclass
class UserDTO:
    id: str
    name: str
    email: str
    license_number: str
    license_expiry_date: date

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            license_number=user.driving_license.license_number,
            license_expiry_date=user.driving_license.expiry_date,
        )
