from fastapi import APIRouter, Depends, Query, status

from car_rental.api.dependencies import get_use_cases
from car_rental.api.schemas.cars import AvailableCarResponse, CarResponse
from car_rental.domain.value_objects.date_range import DateRange

router = APIRouter()


@router.get(
    "/cars/available",
    response_model=list[AvailableCarResponse],
    status_code=status.HTTP_200_OK,
)
async def get_available_cars(
    from_date: str = Query(alias="from"),
    to_date: str = Query(alias="to"),
    use_cases=Depends(get_use_cases),
) -> list[AvailableCarResponse]:
    date_range = DateRange.from_strings(from_date, to_date)
    cars = await use_cases["get_available_cars"].execute(
        start_date=date_range.start_date,
        end_date=date_range.end_date,
    )
    return [AvailableCarResponse.model_validate(car, from_attributes=True) for car in cars]


@router.get("/cars/all", response_model=list[CarResponse])
async def get_all_cars(use_cases=Depends(get_use_cases)) -> list[CarResponse]:
    cars = await use_cases["get_all_cars"].execute()
    return [CarResponse.model_validate(car, from_attributes=True) for car in cars]


@router.get("/cars/{car_id}", response_model=CarResponse)
async def get_car(car_id: str, use_cases=Depends(get_use_cases)) -> CarResponse:
    car = await use_cases["get_car"].execute(car_id)
    return CarResponse.model_validate(car, from_attributes=True)


@router.get("/cars/{car_id}/quote", response_model=AvailableCarResponse)
async def get_quote(
    car_id: str,
    from_date: str = Query(alias="from"),
    to_date: str = Query(alias="to"),
    use_cases=Depends(get_use_cases),
) -> AvailableCarResponse:
    date_range = DateRange.from_strings(from_date, to_date)
    quote = await use_cases["get_quote"].execute(
        car_id=car_id,
        start_date=date_range.start_date,
        end_date=date_range.end_date,
    )
    return AvailableCarResponse.model_validate(quote, from_attributes=True)
