"""Homepage router: the public aggregate a coach's site renders."""

from uuid import UUID

from fastapi import APIRouter

from coachsite.application.queries import HomePageQuery
from coachsite.infrastructure.persistence.sqlalchemy import (
    BannerRepositorySQLAlchemy,
    HomePageRepositorySQLAlchemy,
    TestimonialRepositorySQLAlchemy,
)
from coachsite.presentation.api.dependencies import DBSession
from coachsite.presentation.api.schemas.homepage import (
    HomePageEnvelope,
    home_page_to_response,
)
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

router = APIRouter()


@router.get(
    "/{user_id}",
    summary="Get a user's homepage",
    responses={
        200: {"description": "Homepage with banners and testimonials in order"},
        404: {"description": "User or homepage not found"},
    },
)
async def get_home_page(user_id: UUID, session: DBSession) -> HomePageEnvelope:
    query = HomePageQuery(
        user_repository=UserRepositorySQLAlchemy(session),
        home_page_repository=HomePageRepositorySQLAlchemy(session),
        banner_repository=BannerRepositorySQLAlchemy(session),
        testimonial_repository=TestimonialRepositorySQLAlchemy(session),
    )
    view = await query.execute(user_id)
    return HomePageEnvelope(
        message="Home page fetched successfully",
        home_page=home_page_to_response(view),
    )
