from datetime import date

from pydantic import AliasChoices, BaseModel, ConfigDict, EmailStr, Field


class DrivingLicensePayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    license_number: str = Field(
        min_length=1, validation_alias=AliasChoices("license_number", "licenseNumber")
    )
    expiry_date: date = Field(validation_alias=AliasChoices("expiry_date", "expiryDate"))


class CreateUserRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    email: EmailStr
    driving_license: DrivingLicensePayload = Field(
        validation_alias=AliasChoices("driving_license", "drivingLicense")
    )


class DrivingLicenseResponse(BaseModel):
    license_number: str
    expiry_date: date


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    driving_license: DrivingLicenseResponse


class CreateUserResponse(BaseModel):
    message: str = "User created successfully"
    user_id: str
