import logging

from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.application.interfaces.lock_manager import LockManager
from car_rental.application.interfaces.transaction_manager import TransactionManager
from car_rental.application.use_cases.create_booking import car_lock_key, user_lock_key
from car_rental.domain.errors import BookingNotFoundError
from car_rental.domain.services.booking_policy import BookingPolicy
from car_rental.infrastructure.db.retry import retry_on_conflict

logger = logging.getLogger(__name__)


class CancelBookingUseCase:
    """
    Cancela una reserva y devuelve la unidad al stock del auto.

    Una segunda cancelación de la misma reserva falla con
    BookingNotFoundError.
    """

    def __init__(
        self,
        booking_repo: BookingRepo,
        car_repo: CarRepo,
        transaction_manager: TransactionManager,
        lock_manager: LockManager,
        booking_policy: BookingPolicy,
        max_attempts: int = 3,
        retry_base_delay: float = 0.05,
    ) -> None:
        self._booking_repo = booking_repo
        self._car_repo = car_repo
        self._transaction_manager = transaction_manager
        self._lock_manager = lock_manager
        self._policy = booking_policy
        self._max_attempts = max_attempts
        self._retry_base_delay = retry_base_delay

    async def execute(self, booking_id: str) -> None:
        async with self._transaction_manager.start():
            existing = await self._booking_repo.get_by_id(booking_id)
        if existing is None:
            raise BookingNotFoundError(booking_id)

        await retry_on_conflict(
            lambda: self._cancel(booking_id, existing.car_id, existing.user_id),
            max_attempts=self._max_attempts,
            base_delay=self._retry_base_delay,
        )
        logger.info(
            "Reserva cancelada",
            extra={"booking_id": booking_id, "car_id": existing.car_id},
        )

    async def _cancel(self, booking_id: str, car_id: str, user_id: str) -> None:
        async with self._lock_manager.acquire(car_lock_key(car_id), user_lock_key(user_id)):
            async with self._transaction_manager.start():
                # se vuelve a leer bajo el lock: otra cancelación pudo ganar
                booking = await self._booking_repo.get_by_id(booking_id)
                if booking is None:
                    raise BookingNotFoundError(booking_id)

                car = await self._car_repo.get_by_id(booking.car_id)
                self._policy.release(booking, car)

                await self._booking_repo.delete(booking_id)
                if car is not None:
                    await self._car_repo.save(car)
