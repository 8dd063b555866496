import logging

from car_rental.application.dtos.booking_dto import CreateBookingDTO
from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.application.interfaces.clock import Clock
from car_rental.application.interfaces.id_generator import IdGenerator
from car_rental.application.interfaces.lock_manager import LockManager
from car_rental.application.interfaces.transaction_manager import TransactionManager
from car_rental.application.interfaces.user_repo import UserRepo
from car_rental.domain.entities.booking import Booking
from car_rental.domain.errors import BusinessRuleError, EntityNotFoundError
from car_rental.domain.services.booking_policy import BookingPolicy, BookingRequest
from car_rental.domain.value_objects.date_range import DateRange
from car_rental.infrastructure.db.retry import retry_on_conflict

logger = logging.getLogger(__name__)


def car_lock_key(car_id: str) -> str:
    return f"car:{car_id}"


def user_lock_key(user_id: str) -> str:
    return f"user:{user_id}"


class CreateBookingUseCase:
    def __init__(
        self,
        booking_repo: BookingRepo,
        car_repo: CarRepo,
        user_repo: UserRepo,
        transaction_manager: TransactionManager,
        lock_manager: LockManager,
        booking_policy: BookingPolicy,
        id_generator: IdGenerator,
        clock: Clock,
        max_attempts: int = 3,
        retry_base_delay: float = 0.05,
    ) -> None:
        self._booking_repo = booking_repo
        self._car_repo = car_repo
        self._user_repo = user_repo
        self._transaction_manager = transaction_manager
        self._lock_manager = lock_manager
        self._policy = booking_policy
        self._id_generator = id_generator
        self._clock = clock
        self._max_attempts = max_attempts
        self._retry_base_delay = retry_base_delay

    async def execute(self, dto: CreateBookingDTO) -> Booking:
        request = BookingRequest(
            user_id=dto.user_id,
            car_id=dto.car_id,
            date_range=DateRange(start_date=dto.start_date, end_date=dto.end_date),
        )

        try:
            booking = await retry_on_conflict(
                lambda: self._book(request),
                max_attempts=self._max_attempts,
                base_delay=self._retry_base_delay,
            )
        except (EntityNotFoundError, BusinessRuleError) as exc:
            logger.info(
                "Reserva rechazada",
                extra={
                    "code": exc.code,
                    "user_id": request.user_id,
                    "car_id": request.car_id,
                    "date_range": str(request.date_range),
                },
            )
            raise

        logger.info(
            "Reserva creada",
            extra={
                "booking_id": booking.id,
                "user_id": booking.user_id,
                "car_id": booking.car_id,
                "date_range": str(booking.date_range),
                "total_price": str(booking.total_price),
            },
        )
        return booking

    async def _book(self, request: BookingRequest) -> Booking:
        keys = (car_lock_key(request.car_id), user_lock_key(request.user_id))
        async with self._lock_manager.acquire(*keys):
            async with self._transaction_manager.start():
                user = await self._user_repo.get_by_id(request.user_id)
                car = await self._car_repo.get_by_id(request.car_id)

                car_bookings = []
                user_bookings = []
                if user is not None and car is not None:
                    car_bookings = await self._booking_repo.list_by_car_overlapping(
                        request.car_id, request.date_range
                    )
                    user_bookings = await self._booking_repo.list_by_user_overlapping(
                        request.user_id, request.date_range
                    )

                booking = self._policy.create_booking(
                    request=request,
                    user=user,
                    car=car,
                    car_bookings=car_bookings,
                    user_bookings=user_bookings,
                    booking_id=self._id_generator.generate_id(),
                    created_at=self._clock.now(),
                )

                await self._booking_repo.save(booking)
                await self._car_repo.save(car)

        return booking
