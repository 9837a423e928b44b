"""Homepage aggregate schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from coachsite.application.queries import HomePageView
from coachsite.presentation.api.schemas.banners import (
    BannerResponse,
    banner_to_response,
)
from coachsite.presentation.api.schemas.testimonials import (
    TestimonialResponse,
    testimonial_to_response,
)
from coachsite.presentation.api.schemas.users import UserResponse, user_to_response


class HomePageResponse(BaseModel):
    """A coach's homepage with its content in display order."""

    id: UUID
    user_id: UUID
    owner: UserResponse
    banners: list[BannerResponse]
    testimonials: list[TestimonialResponse]
    created_at: datetime
    updated_at: datetime


class HomePageEnvelope(BaseModel):
    message: str
    home_page: HomePageResponse


def home_page_to_response(view: HomePageView) -> HomePageResponse:
    return HomePageResponse(
        id=view.home_page.id,
        user_id=view.home_page.user_id,
        owner=user_to_response(view.owner),
        banners=[banner_to_response(b) for b in view.banners],
        testimonials=[testimonial_to_response(t) for t in view.testimonials],
        created_at=view.home_page.created_at,
        updated_at=view.home_page.updated_at,
    )
