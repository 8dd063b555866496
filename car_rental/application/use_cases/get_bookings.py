from car_rental.application.dtos.booking_dto import BookingDTO
from car_rental.application.interfaces.booking_repo import BookingRepo


class GetAllBookingsUseCase:
    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self) -> list[BookingDTO]:
        return [BookingDTO.from_entity(b) for b in await self._booking_repo.list_all()]


class GetBookingsByUserIdUseCase:
    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self, user_id: str) -> list[BookingDTO]:
        bookings = await self._booking_repo.list_by_user(user_id)
        return [BookingDTO.from_entity(b) for b in bookings]


class GetBookingsByCarIdUseCase:
    def __init__(self, booking_repo: BookingRepo) -> None:
        self._booking_repo = booking_repo

    async def execute(self, car_id: str) -> list[BookingDTO]:
        bookings = await self._booking_repo.list_by_car(car_id)
        return [BookingDTO.from_entity(b) for b in bookings]
