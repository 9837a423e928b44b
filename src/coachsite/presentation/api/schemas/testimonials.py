"""Testimonial schemas for responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from coachsite.domain.homepage import Testimonial
from coachsite.presentation.api.schemas.common import (
    MediaAssetResponse,
    media_to_response,
)


class TestimonialResponse(BaseModel):
    id: UUID
    user_id: UUID
    home_page_id: UUID
    name: str
    role: str | None = None
    review: str
    rating: int = Field(..., ge=1, le=5)
    image: MediaAssetResponse | None = None
    domain_url: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "7d1c2a4e-1b2f-4c3d-9e8f-0a1b2c3d4e5f",
                "user_id": "550e8400-e29b-41d4-a716-446655440000",
                "home_page_id": "0f9e8d7c-6b5a-4f3e-2d1c-0b9a8f7e6d5c",
                "name": "Asha R.",
                "role": "JEE 2024 topper",
                "review": "The weekly mock tests made all the difference.",
                "rating": 5,
                "image": None,
                "domain_url": "brightminds.example.com",
                "is_active": True,
                "created_at": "2024-01-15T10:30:00Z",
                "updated_at": "2024-01-15T10:30:00Z",
            },
        },
    )


class TestimonialEnvelope(BaseModel):
    message: str
    testimonial: TestimonialResponse


class TestimonialListResponse(BaseModel):
    message: str
    testimonials: list[TestimonialResponse]


def testimonial_to_response(testimonial: Testimonial) -> TestimonialResponse:
    return TestimonialResponse(
        id=testimonial.id,
        user_id=testimonial.user_id,
        home_page_id=testimonial.home_page_id,
        name=testimonial.name,
        role=testimonial.role,
        review=testimonial.review,
        rating=testimonial.rating,
        image=media_to_response(testimonial.image),
        domain_url=testimonial.domain_url,
        is_active=testimonial.is_active,
        created_at=testimonial.created_at,
        updated_at=testimonial.updated_at,
    )
