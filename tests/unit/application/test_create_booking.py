"""
Tests para CreateBookingUseCase sobre repositorios in-memory.

Cubre:
- Reserva exitosa (precio, stock, persistencia)
- Errores de negocio en orden
- Atomicidad: un fallo al guardar el auto no deja la reserva guardada
- Reintento ante OptimisticLockError
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from car_rental.application.dtos.booking_dto import CreateBookingDTO
from car_rental.application.use_cases.create_booking import CreateBookingUseCase
from car_rental.domain.errors import (
    CarNotFoundError,
    CarUnavailableError,
    DuplicateBookingError,
    InvalidRangeError,
    LicenseInvalidError,
    OptimisticLockError,
    UserNotFoundError,
)
from car_rental.domain.services.booking_policy import AvailabilityMode, BookingPolicy
from car_rental.infrastructure.in_memory import InMemoryCarRepo, InMemoryTransactionManager
from tests.builders import NOW, make_car, make_user


def _dto(user_id="user-john", car_id="car-yaris", start=date(2028, 6, 1), end=date(2028, 6, 5)):
    return CreateBookingDTO(user_id=user_id, car_id=car_id, start_date=start, end_date=end)


class TestCreateBookingSuccess:
    """Tests para reservas válidas"""

    @pytest.mark.asyncio
    async def test_books_and_decrements_stock(self, use_cases, yaris, john, car_repo, booking_repo):
        booking = await use_cases["create_booking"].execute(_dto())

        assert booking.id == "booking-0001"
        assert booking.total_price == Decimal("492.15")
        assert booking.created_at == NOW

        stored_car = await car_repo.get_by_id(yaris.id)
        assert stored_car.stock == 2

        stored = await booking_repo.get_by_id(booking.id)
        assert stored is not None
        assert stored.user_id == john.id

    @pytest.mark.asyncio
    async def test_peak_to_mid_total(self, use_cases, yaris, john):
        booking = await use_cases["create_booking"].execute(
            _dto(start=date(2028, 9, 15), end=date(2028, 9, 19))
        )
        assert booking.total_price == Decimal("405.99")

    @pytest.mark.asyncio
    async def test_license_valid_until_day_after_end(self, use_cases, yaris, user_repo):
        await user_repo.save(make_user("user-edge", expiry=date(2028, 6, 6)))

        booking = await use_cases["create_booking"].execute(_dto(user_id="user-edge"))

        assert booking.user_id == "user-edge"


class TestCreateBookingRules:
    """Tests para reglas de negocio a través del caso de uso"""

    @pytest.mark.asyncio
    async def test_unknown_user_and_car(self, use_cases):
        with pytest.raises(UserNotFoundError):
            await use_cases["create_booking"].execute(_dto(user_id="nobody", car_id="nothing"))

    @pytest.mark.asyncio
    async def test_unknown_car(self, use_cases, john):
        with pytest.raises(CarNotFoundError):
            await use_cases["create_booking"].execute(_dto(car_id="nothing"))

    @pytest.mark.asyncio
    async def test_invalid_range(self, use_cases, yaris, john):
        with pytest.raises(InvalidRangeError):
            await use_cases["create_booking"].execute(_dto(start=date(2028, 6, 5), end=date(2028, 6, 1)))

    @pytest.mark.asyncio
    async def test_license_expiring_on_end_date(self, use_cases, yaris, user_repo, car_repo, booking_repo):
        await user_repo.save(make_user("user-edge", expiry=date(2028, 6, 5)))

        with pytest.raises(LicenseInvalidError):
            await use_cases["create_booking"].execute(_dto(user_id="user-edge"))

        assert (await car_repo.get_by_id(yaris.id)).stock == 3
        assert await booking_repo.list_all() == []

    @pytest.mark.asyncio
    async def test_duplicate_on_same_car(self, use_cases, yaris, john):
        await use_cases["create_booking"].execute(_dto())

        with pytest.raises(DuplicateBookingError):
            await use_cases["create_booking"].execute(_dto(start=date(2028, 6, 5), end=date(2028, 6, 7)))

    @pytest.mark.asyncio
    async def test_duplicate_on_other_car(self, use_cases, yaris, john, car_repo):
        await car_repo.save(make_car("car-ibiza", brand="Seat", model="Ibiza"))
        await use_cases["create_booking"].execute(_dto())

        with pytest.raises(DuplicateBookingError):
            await use_cases["create_booking"].execute(
                _dto(car_id="car-ibiza", start=date(2028, 6, 3), end=date(2028, 6, 4))
            )

    @pytest.mark.asyncio
    async def test_same_user_non_overlapping_ranges(self, use_cases, yaris, john):
        await use_cases["create_booking"].execute(_dto())
        second = await use_cases["create_booking"].execute(_dto(start=date(2028, 6, 6), end=date(2028, 6, 8)))

        assert second.id == "booking-0002"

    @pytest.mark.asyncio
    async def test_created_at_follows_clock(self, use_cases, yaris, john, clock):
        first = await use_cases["create_booking"].execute(_dto())
        clock.advance(days=2, hours=3)
        second = await use_cases["create_booking"].execute(_dto(start=date(2028, 6, 6), end=date(2028, 6, 8)))

        assert first.created_at == NOW
        assert second.created_at - first.created_at == timedelta(days=2, hours=3)
        assert clock.today() == date(2028, 1, 3)

    @pytest.mark.asyncio
    async def test_last_unit_goes_to_first_user(self, use_cases, car_repo, john, jane):
        await car_repo.save(make_car("car-jaguar", stock=1))

        await use_cases["create_booking"].execute(_dto(user_id=john.id, car_id="car-jaguar"))

        with pytest.raises(CarUnavailableError):
            await use_cases["create_booking"].execute(_dto(user_id=jane.id, car_id="car-jaguar"))


class TestCreateBookingAvailabilityModes:
    """Tests para disponibilidad efectiva vs stock crudo"""

    def _use_case(self, mode, car_repo, user_repo, booking_repo, tx_manager, lock_manager, id_generator, clock):
        return CreateBookingUseCase(
            booking_repo=booking_repo,
            car_repo=car_repo,
            user_repo=user_repo,
            transaction_manager=tx_manager,
            lock_manager=lock_manager,
            booking_policy=BookingPolicy(availability_mode=mode),
            id_generator=id_generator,
            clock=clock,
            retry_base_delay=0,
        )

    @pytest.mark.asyncio
    async def test_effective_mode_rejects_overlap_with_stock_left(
        self, car_repo, user_repo, booking_repo, tx_manager, lock_manager, id_generator, clock, john, jane
    ):
        await car_repo.save(make_car("car-qashqai", stock=2))
        use_case = self._use_case(
            AvailabilityMode.EFFECTIVE, car_repo, user_repo, booking_repo, tx_manager, lock_manager, id_generator, clock
        )

        await use_case.execute(_dto(user_id=john.id, car_id="car-qashqai"))

        # stock 1, una reserva superpuesta: stock efectivo 0
        with pytest.raises(CarUnavailableError):
            await use_case.execute(
                _dto(user_id=jane.id, car_id="car-qashqai", start=date(2028, 6, 3), end=date(2028, 6, 7))
            )

        # sin superposición hay una unidad efectiva
        booking = await use_case.execute(
            _dto(user_id=jane.id, car_id="car-qashqai", start=date(2028, 7, 1), end=date(2028, 7, 5))
        )
        assert booking.car_id == "car-qashqai"

    @pytest.mark.asyncio
    async def test_stock_mode_accepts_overlap_with_stock_left(
        self, car_repo, user_repo, booking_repo, tx_manager, lock_manager, id_generator, clock, john, jane
    ):
        await car_repo.save(make_car("car-qashqai", stock=2))
        use_case = self._use_case(
            AvailabilityMode.STOCK, car_repo, user_repo, booking_repo, tx_manager, lock_manager, id_generator, clock
        )

        await use_case.execute(_dto(user_id=john.id, car_id="car-qashqai"))
        await use_case.execute(
            _dto(user_id=jane.id, car_id="car-qashqai", start=date(2028, 6, 3), end=date(2028, 6, 7))
        )

        assert (await car_repo.get_by_id("car-qashqai")).stock == 0


class FailingCarRepo(InMemoryCarRepo):
    """Falla en save() las primeras `failures` veces con la excepción dada."""

    def __init__(self, error_factory, failures: int = 1) -> None:
        super().__init__()
        self._error_factory = error_factory
        self.failures = failures
        self.save_calls = 0
        self._armed = False

    def arm(self) -> None:
        self._armed = True

    async def save(self, car) -> None:
        self.save_calls += 1
        if self._armed and self.failures > 0:
            self.failures -= 1
            raise self._error_factory(car)
        await super().save(car)


class TestCreateBookingAtomicity:
    """Tests para rollback y reintento"""

    def _wire(self, car_repo, user_repo, booking_repo, lock_manager, id_generator, clock):
        tx_manager = InMemoryTransactionManager(car_repo, user_repo, booking_repo)
        return CreateBookingUseCase(
            booking_repo=booking_repo,
            car_repo=car_repo,
            user_repo=user_repo,
            transaction_manager=tx_manager,
            lock_manager=lock_manager,
            booking_policy=BookingPolicy(),
            id_generator=id_generator,
            clock=clock,
            max_attempts=3,
            retry_base_delay=0,
        )

    @pytest.mark.asyncio
    async def test_failed_car_save_rolls_back_booking(
        self, user_repo, booking_repo, lock_manager, id_generator, clock, john
    ):
        car_repo = FailingCarRepo(lambda car: RuntimeError("disk full"))
        await car_repo.save(make_car())
        car_repo.arm()
        use_case = self._wire(car_repo, user_repo, booking_repo, lock_manager, id_generator, clock)

        with pytest.raises(RuntimeError):
            await use_case.execute(_dto())

        assert await booking_repo.list_all() == []
        assert (await car_repo.get_by_id("car-yaris")).stock == 3

    @pytest.mark.asyncio
    async def test_retries_on_optimistic_lock_conflict(
        self, user_repo, booking_repo, lock_manager, id_generator, clock, john
    ):
        car_repo = FailingCarRepo(lambda car: OptimisticLockError(car.id, car.lock_version, car.lock_version + 1))
        await car_repo.save(make_car())
        car_repo.arm()
        use_case = self._wire(car_repo, user_repo, booking_repo, lock_manager, id_generator, clock)

        booking = await use_case.execute(_dto())

        bookings = await booking_repo.list_all()
        assert [b.id for b in bookings] == [booking.id]
        assert booking.id == "booking-0002"
        assert (await car_repo.get_by_id("car-yaris")).stock == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(
        self, user_repo, booking_repo, lock_manager, id_generator, clock, john
    ):
        car_repo = FailingCarRepo(
            lambda car: OptimisticLockError(car.id, car.lock_version, car.lock_version + 1), failures=5
        )
        await car_repo.save(make_car())
        car_repo.arm()
        use_case = self._wire(car_repo, user_repo, booking_repo, lock_manager, id_generator, clock)

        with pytest.raises(OptimisticLockError):
            await use_case.execute(_dto())

        assert car_repo.save_calls == 1 + 3
        assert await booking_repo.list_all() == []
