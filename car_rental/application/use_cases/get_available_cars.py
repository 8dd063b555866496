from datetime import date

from car_rental.application.dtos.car_dto import AvailableCarDTO
from car_rental.application.interfaces.booking_repo import BookingRepo
from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.domain.errors import CarNotFoundError
from car_rental.domain.services.availability import AvailabilityService
from car_rental.domain.services.pricing import PricingEngine
from car_rental.domain.value_objects.date_range import DateRange


class GetAvailableCarsUseCase:
    """Lista los autos con stock efectivo > 0 en el rango, con su cotización."""

    def __init__(
        self,
        car_repo: CarRepo,
        booking_repo: BookingRepo,
        pricing_engine: PricingEngine,
        availability_service: AvailabilityService,
    ) -> None:
        self._car_repo = car_repo
        self._booking_repo = booking_repo
        self._pricing = pricing_engine
        self._availability = availability_service

    async def execute(self, start_date: date, end_date: date) -> list[AvailableCarDTO]:
        date_range = DateRange(start_date=start_date, end_date=end_date)

        result: list[AvailableCarDTO] = []
        for car in await self._car_repo.list_all():
            overlapping = await self._booking_repo.list_by_car_overlapping(car.id, date_range)
            effective_stock = self._availability.effective_stock(car, date_range, overlapping)
            if effective_stock <= 0:
                continue
            quote = self._pricing.price_for_range(car, date_range)
            result.append(AvailableCarDTO.from_quote(car, quote, effective_stock))
        return result


class GetQuoteUseCase:
    """Cotiza un auto concreto para un rango, esté o no disponible."""

    def __init__(
        self,
        car_repo: CarRepo,
        booking_repo: BookingRepo,
        pricing_engine: PricingEngine,
        availability_service: AvailabilityService,
    ) -> None:
        self._car_repo = car_repo
        self._booking_repo = booking_repo
        self._pricing = pricing_engine
        self._availability = availability_service

    async def execute(self, car_id: str, start_date: date, end_date: date) -> AvailableCarDTO:
        date_range = DateRange(start_date=start_date, end_date=end_date)

        car = await self._car_repo.get_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)

        overlapping = await self._booking_repo.list_by_car_overlapping(car.id, date_range)
        quote = self._pricing.price_for_range(car, date_range)
        return AvailableCarDTO.from_quote(
            car, quote, self._availability.effective_stock(car, date_range, overlapping)
        )
