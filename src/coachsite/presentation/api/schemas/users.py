"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from coachsite.presentation.api.schemas.common import (
    MediaAssetResponse,
    media_to_response,
)
from coachsite_identity import User


class UserResponse(BaseModel):
    """Public view of a user account."""

    id: UUID
    name: str
    email: str
    mobile: str | None = None
    domain_url: str | None = None
    role: str
    is_verified: bool
    avatar: MediaAssetResponse | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Bright Minds Academy",
                "email": "coach@example.com",
                "mobile": "+91 98765 43210",
                "domain_url": "brightminds.example.com",
                "role": "user",
                "is_verified": True,
                "avatar": None,
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            },
        },
    )


class UserEnvelope(BaseModel):
    message: str
    user: UserResponse


class UserListResponse(BaseModel):
    message: str
    users: list[UserResponse]
    total: int


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        mobile=user.mobile,
        domain_url=user.domain_url,
        role=user.role.value,
        is_verified=user.is_verified,
        avatar=media_to_response(user.avatar),
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
