"""
Capa de Dominio - Renta de autos.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.

Estructura:
- entities/: Car, User, Booking
- value_objects/: DateRange, DrivingLicense, PriceQuote
- services/: PricingEngine, AvailabilityService, BookingPolicy
- season.py: temporadas y calendario
- errors.py: excepciones específicas del dominio
"""

from car_rental.domain.errors import (
    BookingNotFoundError,
    BusinessRuleError,
    CarNotFoundError,
    CarUnavailableError,
    DomainError,
    DuplicateBookingError,
    EntityNotFoundError,
    InvalidRangeError,
    LicenseInvalidError,
    OptimisticLockError,
    StockExhaustedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from car_rental.domain.season import Season, SeasonCalendar, get_season
from car_rental.domain.value_objects import DateRange, DrivingLicense, PriceQuote
from car_rental.domain.entities import Booking, Car, User
from car_rental.domain.services import (
    AvailabilityMode,
    AvailabilityService,
    BookingPolicy,
    BookingRequest,
    PricingEngine,
)

__all__ = [
    # Entities
    "Booking",
    "Car",
    "User",
    # Value Objects
    "DateRange",
    "DrivingLicense",
    "PriceQuote",
    # Seasons
    "Season",
    "SeasonCalendar",
    "get_season",
    # Services
    "AvailabilityMode",
    "AvailabilityService",
    "BookingPolicy",
    "BookingRequest",
    "PricingEngine",
    # Errors
    "DomainError",
    "EntityNotFoundError",
    "BusinessRuleError",
    "UserNotFoundError",
    "CarNotFoundError",
    "BookingNotFoundError",
    "InvalidRangeError",
    "StockExhaustedError",
    "CarUnavailableError",
    "DuplicateBookingError",
    "LicenseInvalidError",
    "UserAlreadyExistsError",
    "OptimisticLockError",
]
