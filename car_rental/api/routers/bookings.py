from fastapi import APIRouter, Depends, status

from car_rental.api.dependencies import get_use_cases
from car_rental.api.schemas.bookings import (
    BookingResponse,
    CreateBookingRequest,
    CreateBookingResponse,
    MessageResponse,
)
from car_rental.application.dtos.booking_dto import CreateBookingDTO

router = APIRouter()


@router.get("/bookings", response_model=list[BookingResponse])
async def get_all_bookings(use_cases=Depends(get_use_cases)) -> list[BookingResponse]:
    bookings = await use_cases["get_all_bookings"].execute()
    return [BookingResponse.model_validate(b, from_attributes=True) for b in bookings]


@router.post(
    "/bookings",
    response_model=CreateBookingResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    payload: CreateBookingRequest,
    use_cases=Depends(get_use_cases),
) -> CreateBookingResponse:
    booking = await use_cases["create_booking"].execute(
        CreateBookingDTO(
            user_id=payload.user_id,
            car_id=payload.car_id,
            start_date=payload.start_date,
            end_date=payload.end_date,
        )
    )
    return CreateBookingResponse(booking_id=booking.id, total_price=booking.total_price)


@router.get("/bookings/car/{car_id}", response_model=list[BookingResponse])
async def get_bookings_by_car(car_id: str, use_cases=Depends(get_use_cases)) -> list[BookingResponse]:
    bookings = await use_cases["get_bookings_by_car"].execute(car_id)
    return [BookingResponse.model_validate(b, from_attributes=True) for b in bookings]


@router.get("/bookings/user/{user_id}", response_model=list[BookingResponse])
async def get_bookings_by_user(user_id: str, use_cases=Depends(get_use_cases)) -> list[BookingResponse]:
    bookings = await use_cases["get_bookings_by_user"].execute(user_id)
    return [BookingResponse.model_validate(b, from_attributes=True) for b in bookings]


@router.delete("/bookings/{booking_id}", response_model=MessageResponse)
async def cancel_booking(booking_id: str, use_cases=Depends(get_use_cases)) -> MessageResponse:
    await use_cases["cancel_booking"].execute(booking_id)
    return MessageResponse(message="Booking deleted successfully")
