from functools import lru_cache
from typing import Any, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.application.interfaces.clock import Clock, SystemClock
from car_rental.application.interfaces.id_generator import IdGenerator, RealIdGenerator
from car_rental.application.interfaces.lock_manager import LockManager
from car_rental.application.interfaces.transaction_manager import TransactionManager
from car_rental.application.interfaces.user_repo import UserRepo
from car_rental.application.use_cases import (
    CancelBookingUseCase,
    CreateBookingUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetAllBookingsUseCase,
    GetAllCarsUseCase,
    GetAllUsersUseCase,
    GetAvailableCarsUseCase,
    GetBookingsByCarIdUseCase,
    GetBookingsByUserIdUseCase,
    GetCarByIdUseCase,
    GetQuoteUseCase,
    GetUserUseCase,
)
from car_rental.config import Settings, get_settings
from car_rental.domain.services import AvailabilityService, BookingPolicy, PricingEngine
from car_rental.infrastructure.db.engine import AsyncSessionLocal
from car_rental.infrastructure.db.repositories import BookingRepoSQL, CarRepoSQL, UserRepoSQL
from car_rental.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from car_rental.infrastructure.in_memory import (
    InMemoryBookingRepo,
    InMemoryCarRepo,
    InMemoryTransactionManager,
    InMemoryUserRepo,
    KeyedLockManager,
)


async def get_session(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[AsyncSession | None, None]:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


def build_in_memory_bundle() -> dict[str, Any]:
    car_repo = InMemoryCarRepo()
    user_repo = InMemoryUserRepo()
    booking_repo = InMemoryBookingRepo()
    return {
        "car_repo": car_repo,
        "user_repo": user_repo,
        "booking_repo": booking_repo,
        "tx_manager": InMemoryTransactionManager(car_repo, user_repo, booking_repo),
        "lock_manager": KeyedLockManager(),
        "id_generator": RealIdGenerator(),
        "clock": SystemClock(),
    }


@lru_cache(maxsize=1)
def in_memory_bundle() -> dict[str, Any]:
    return build_in_memory_bundle()


@lru_cache(maxsize=1)
def _process_lock_manager() -> KeyedLockManager:
    # los locks sólo serializan dentro de este proceso; entre procesos
    # la protección es la escritura condicional de CarRepoSQL
    return KeyedLockManager()


def build_use_cases(
    *,
    settings: Settings,
    car_repo: CarRepo,
    user_repo: UserRepo,
    booking_repo: BookingRepo,
    tx_manager: TransactionManager,
    lock_manager: LockManager,
    id_generator: IdGenerator,
    clock: Clock,
) -> dict[str, Any]:
    pricing = PricingEngine()
    availability = AvailabilityService()
    policy = BookingPolicy(
        pricing_engine=pricing,
        availability_service=availability,
        availability_mode=settings.availability_mode,
    )
    return {
        "create_booking": CreateBookingUseCase(
            booking_repo=booking_repo,
            car_repo=car_repo,
            user_repo=user_repo,
            transaction_manager=tx_manager,
            lock_manager=lock_manager,
            booking_policy=policy,
            id_generator=id_generator,
            clock=clock,
            max_attempts=settings.booking_retry_attempts,
            retry_base_delay=settings.booking_retry_base_delay,
        ),
        "cancel_booking": CancelBookingUseCase(
            booking_repo=booking_repo,
            car_repo=car_repo,
            transaction_manager=tx_manager,
            lock_manager=lock_manager,
            booking_policy=policy,
            max_attempts=settings.booking_retry_attempts,
            retry_base_delay=settings.booking_retry_base_delay,
        ),
        "get_all_bookings": GetAllBookingsUseCase(booking_repo),
        "get_bookings_by_user": GetBookingsByUserIdUseCase(booking_repo),
        "get_bookings_by_car": GetBookingsByCarIdUseCase(booking_repo),
        "get_available_cars": GetAvailableCarsUseCase(
            car_repo=car_repo,
            booking_repo=booking_repo,
            pricing_engine=pricing,
            availability_service=availability,
        ),
        "get_quote": GetQuoteUseCase(
            car_repo=car_repo,
            booking_repo=booking_repo,
            pricing_engine=pricing,
            availability_service=availability,
        ),
        "get_all_cars": GetAllCarsUseCase(car_repo),
        "get_car": GetCarByIdUseCase(car_repo),
        "create_user": CreateUserUseCase(
            user_repo=user_repo,
            transaction_manager=tx_manager,
            id_generator=id_generator,
        ),
        "get_user": GetUserUseCase(user_repo),
        "get_all_users": GetAllUsersUseCase(user_repo),
        "delete_user": DeleteUserUseCase(user_repo=user_repo, transaction_manager=tx_manager),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
) -> dict[str, Any]:
    if settings.use_in_memory:
        bundle = in_memory_bundle()
        return build_use_cases(
            settings=settings,
            car_repo=bundle["car_repo"],
            user_repo=bundle["user_repo"],
            booking_repo=bundle["booking_repo"],
            tx_manager=bundle["tx_manager"],
            lock_manager=bundle["lock_manager"],
            id_generator=bundle["id_generator"],
            clock=bundle["clock"],
        )

    if not session:
        raise RuntimeError("DB session not available")

    return build_use_cases(
        settings=settings,
        car_repo=CarRepoSQL(session),
        user_repo=UserRepoSQL(session),
        booking_repo=BookingRepoSQL(session),
        tx_manager=SQLAlchemyTransactionManager(session),
        lock_manager=_process_lock_manager(),
        id_generator=RealIdGenerator(),
        clock=SystemClock(),
    )
