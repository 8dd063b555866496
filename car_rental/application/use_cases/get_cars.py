from car_rental.application.dtos.car_dto import CarDTO
from car_rental.application.interfaces.car_repo import CarRepo
from car_rental.domain.errors import CarNotFoundError


class GetAllCarsUseCase:
    def __init__(self, car_repo: CarRepo) -> None:
        self._car_repo = car_repo

    async def execute(self) -> list[CarDTO]:
        return [CarDTO.from_entity(car) for car in await self._car_repo.list_all()]


class GetCarByIdUseCase:
    def __init__(self, car_repo: CarRepo) -> None:
        self._car_repo = car_repo

    async def execute(self, car_id: str) -> CarDTO:
        car = await self._car_repo.get_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return CarDTO.from_entity(car)
