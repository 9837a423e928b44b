"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from coachsite.presentation.api.schemas.users import UserResponse


class VerifyOtpRequest(BaseModel):
    """Request schema for submitting an emailed one-time code."""

    email: EmailStr
    otp: str = Field(..., min_length=1, max_length=12)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"email": "coach@example.com", "otp": "482913"},
        },
    )


class LoginRequest(BaseModel):
    """Request schema for password login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "coach@example.com",
                "password": "securepassword123",
            },
        },
    )


class EmailRequest(BaseModel):
    """Request schema for operations keyed only by email."""

    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request schema for setting a new password with a reset code."""

    email: EmailStr
    otp: str = Field(..., min_length=1, max_length=12)
    new_password: str = Field(..., min_length=6, max_length=128)


class SignupResponse(BaseModel):
    """Response after signup; the account still needs verification."""

    message: str
    user: UserResponse


class AuthResponse(BaseModel):
    """Response carrying the authenticated user and a session token."""

    message: str
    user: UserResponse
    token: str = Field(..., description="Bearer token for protected routes")
