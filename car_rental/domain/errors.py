"""Excepciones de dominio para el sistema de renta de autos."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(DomainError):
    """Una entidad referenciada no existe."""


class BusinessRuleError(DomainError):
    """Se violó una regla de negocio (determinista, no tiene sentido reintentar)."""


# === Errores de Entidades no encontradas ===


class UserNotFoundError(EntityNotFoundError):
    """El usuario no existe."""

    def __init__(self, user_id: str):
        super().__init__(
            message=f"Usuario no encontrado: {user_id}",
            code="USER_NOT_FOUND",
        )
        self.user_id = user_id


class CarNotFoundError(EntityNotFoundError):
    """El auto no existe."""

    def __init__(self, car_id: str):
        super().__init__(
            message=f"Auto no encontrado: {car_id}",
            code="CAR_NOT_FOUND",
        )
        self.car_id = car_id


class BookingNotFoundError(EntityNotFoundError):
    """La reserva no existe."""

    def __init__(self, booking_id: str):
        super().__init__(
            message=f"Reserva no encontrada: {booking_id}",
            code="BOOKING_NOT_FOUND",
        )
        self.booking_id = booking_id


# === Errores de Reglas de Negocio ===


class InvalidRangeError(BusinessRuleError):
    """Rango de fechas inválido (inicio posterior al fin o fecha ilegible)."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class StockExhaustedError(BusinessRuleError):
    """Se intentó decrementar el stock de un auto por debajo de cero."""

    def __init__(self, car_id: str):
        super().__init__(
            message=f"No se puede decrementar el stock por debajo de cero: auto {car_id}",
            code="STOCK_EXHAUSTED",
        )
        self.car_id = car_id


class CarUnavailableError(BusinessRuleError):
    """El auto no tiene unidades disponibles para las fechas solicitadas."""

    def __init__(self, car_id: str, date_range: object):
        super().__init__(
            message=f"El auto {car_id} no está disponible para {date_range}",
            code="CAR_UNAVAILABLE",
        )
        self.car_id = car_id
        self.date_range = date_range


class DuplicateBookingError(BusinessRuleError):
    """El usuario ya tiene una reserva que se superpone con el rango."""

    def __init__(self, user_id: str, date_range: object):
        super().__init__(
            message=f"El usuario {user_id} ya tiene una reserva para {date_range}",
            code="DUPLICATE_BOOKING",
        )
        self.user_id = user_id
        self.date_range = date_range


class LicenseInvalidError(BusinessRuleError):
    """La licencia de conducir no cubre todo el periodo de la reserva."""

    def __init__(self, license_number: str, date_range: object):
        super().__init__(
            message=(
                f"La licencia {license_number} debe ser válida durante todo "
                f"el periodo de la reserva: {date_range}"
            ),
            code="LICENSE_INVALID",
        )
        self.license_number = license_number
        self.date_range = date_range


# === Errores de Conflicto ===


class UserAlreadyExistsError(DomainError):
    """Ya existe un usuario con ese email."""

    def __init__(self, email: str):
        super().__init__(
            message=f"Ya existe un usuario con email: {email}",
            code="USER_ALREADY_EXISTS",
        )
        self.email = email


class OptimisticLockError(DomainError):
    """Conflicto de concurrencia al actualizar un auto."""

    def __init__(self, car_id: str, expected_version: int, actual_version: int | None):
        super().__init__(
            message=f"Conflicto de concurrencia en auto {car_id}: "
            f"versión esperada {expected_version}, versión actual {actual_version}",
            code="OPTIMISTIC_LOCK_ERROR",
        )
        self.car_id = car_id
        self.expected_version = expected_version
        self.actual_version = actual_version
