from datetime import date, datetime
from decimal import Decimal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CreateBookingRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    user_id: str = Field(min_length=1, validation_alias=AliasChoices("user_id", "userId"))
    car_id: str = Field(min_length=1, validation_alias=AliasChoices("car_id", "carId"))
    start_date: date = Field(validation_alias=AliasChoices("start_date", "startDate"))
    end_date: date = Field(validation_alias=AliasChoices("end_date", "endDate"))


class CreateBookingResponse(BaseModel):
    message: str = "Booking created successfully"
    booking_id: str
    total_price: Decimal


class BookingResponse(BaseModel):
    id: str
    user_id: str
    car_id: str
    car_brand: str
    car_model: str
    start_date: date
    end_date: date
    total_price: Decimal
    created_at: datetime


class MessageResponse(BaseModel):
    message: str
