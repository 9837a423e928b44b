"""Pydantic schemas for API request/response models."""

from coachsite.presentation.api.schemas.auth import (
    AuthResponse,
    EmailRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupResponse,
    VerifyOtpRequest,
)
from coachsite.presentation.api.schemas.banners import (
    BannerEnvelope,
    BannerListResponse,
    BannerResponse,
)
from coachsite.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MediaAssetResponse,
    MessageResponse,
)
from coachsite.presentation.api.schemas.homepage import (
    HomePageEnvelope,
    HomePageResponse,
)
from coachsite.presentation.api.schemas.testimonials import (
    TestimonialEnvelope,
    TestimonialListResponse,
    TestimonialResponse,
)
from coachsite.presentation.api.schemas.users import (
    UserEnvelope,
    UserListResponse,
    UserResponse,
)

__all__ = [
    # Auth
    "AuthResponse",
    "EmailRequest",
    "LoginRequest",
    "ResetPasswordRequest",
    "SignupResponse",
    "VerifyOtpRequest",
    # Banners
    "BannerEnvelope",
    "BannerListResponse",
    "BannerResponse",
    # Common
    "ErrorResponse",
    "HealthResponse",
    "MediaAssetResponse",
    "MessageResponse",
    # Homepage
    "HomePageEnvelope",
    "HomePageResponse",
    # Testimonials
    "TestimonialEnvelope",
    "TestimonialListResponse",
    "TestimonialResponse",
    # Users
    "UserEnvelope",
    "UserListResponse",
    "UserResponse",
]
