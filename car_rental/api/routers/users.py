from fastapi import APIRouter, Depends, status

from car_rental.api.dependencies import get_use_cases
from car_rental.api.schemas.bookings import MessageResponse
from car_rental.api.schemas.users import (
    CreateUserRequest,
    CreateUserResponse,
    DrivingLicenseResponse,
    UserResponse,
)
from car_rental.application.dtos.user_dto import CreateUserDTO, UserDTO

router = APIRouter()


def _to_response(user: UserDTO) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        driving_license=DrivingLicenseResponse(
            license_number=user.license_number,
            expiry_date=user.license_expiry_date,
        ),
    )


@router.post("/users", response_model=CreateUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: CreateUserRequest,
    use_cases=Depends(get_use_cases),
) -> CreateUserResponse:
    user = await use_cases["create_user"].execute(
        CreateUserDTO(
            name=payload.name,
            email=payload.email,
            license_number=payload.driving_license.license_number,
            license_expiry_date=payload.driving_license.expiry_date,
        )
    )
    return CreateUserResponse(user_id=user.id)


@router.get("/users", response_model=list[UserResponse])
async def get_all_users(use_cases=Depends(get_use_cases)) -> list[UserResponse]:
    return [_to_response(u) for u in await use_cases["get_all_users"].execute()]


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, use_cases=Depends(get_use_cases)) -> UserResponse:
    return _to_response(await use_cases["get_user"].execute(user_id))


@router.delete("/users/{user_id}", response_model=MessageResponse)
async def delete_user(user_id: str, use_cases=Depends(get_use_cases)) -> MessageResponse:
    await use_cases["delete_user"].execute(user_id)
    return MessageResponse(message="User deleted successfully")
