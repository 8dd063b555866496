"""Datos de demostración: cinco modelos de auto y dos usuarios."""

import logging
from datetime import date
from decimal import Decimal

from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.application.interfaces.id_generator import IdGenerator
from car_rental.application.interfaces.user_repo import UserRepo
from car_rental.domain.entities.car import Car
from car_rental.domain.entities.user import User
from car_rental.domain.value_objects.driving_license import DrivingLicense

logger = logging.getLogger(__name__)

DEMO_CARS = [
    ("Toyota", "Yaris", 3, "98.43", "76.89", "53.65"),
    ("Seat", "Ibiza", 5, "85.12", "65.73", "46.85"),
    ("Nissan", "Qashqai", 2, "101.46", "82.94", "59.87"),
    ("Jaguar", "e-pace", 1, "120.54", "91.35", "70.27"),
    ("Mercedes", "Vito", 2, "109.16", "89.64", "64.97"),
]

DEMO_USERS = [
    ("John Doe", "john@example.com", "ABC123", date(2030, 1, 1)),
    ("Jane Smith", "jane@example.com", "XYZ789", date(2029, 7, 15)),
]


async def seed_demo_data(
    car_repo: CarRepo,
    user_repo: UserRepo,
    id_generator: IdGenerator,
) -> tuple[list[Car], list[User]]:
    """Inserta el catálogo de demostración. No verifica duplicados."""
    cars = [
        Car(
            id=id_generator.generate_id(),
            brand=brand,
            model=model,
            stock=stock,
            peak_price=Decimal(peak),
            mid_price=Decimal(mid),
            off_price=Decimal(off),
        )
        for brand, model, stock, peak, mid, off in DEMO_CARS
    ]
    for car in cars:
        await car_repo.save(car)

    users = [
        User(
            id=id_generator.generate_id(),
            name=name,
            email=email,
            driving_license=DrivingLicense(license_number=number, expiry_date=expiry),
        )
        for name, email, number, expiry in DEMO_USERS
    ]
    for user in users:
        await user_repo.save(user)

    logger.info("Datos de demostración cargados", extra={"cars": len(cars), "users": len(users)})
    return cars, users
