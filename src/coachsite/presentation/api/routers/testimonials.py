"""Testimonials router: public listing and owner-managed student reviews."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Form, Query, UploadFile, status

from coachsite.application.commands.homepage import (
    CreateTestimonialCommand,
    DeleteTestimonialCommand,
    UpdateTestimonialCommand,
)
from coachsite.application.queries import TestimonialQuery
from coachsite.infrastructure.persistence.sqlalchemy import (
    HomePageRepositorySQLAlchemy,
    TestimonialRepositorySQLAlchemy,
)
from coachsite.presentation.api.dependencies import (
    ContentEditor,
    DBSession,
    MediaService,
)
from coachsite.presentation.api.schemas.common import MessageResponse
from coachsite.presentation.api.schemas.testimonials import (
    TestimonialEnvelope,
    TestimonialListResponse,
    testimonial_to_response,
)
from coachsite.presentation.api.uploads import read_upload
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

router = APIRouter()


@router.get(
    "",
    summary="List testimonials",
    responses={200: {"description": "Testimonials, newest first"}},
)
async def list_testimonials(
    session: DBSession,
    user_id: Annotated[UUID | None, Query()] = None,
    domain_url: Annotated[str | None, Query()] = None,
) -> TestimonialListResponse:
    query = TestimonialQuery(TestimonialRepositorySQLAlchemy(session))
    testimonials = await query.list_testimonials(
        user_id=user_id,
        domain_url=domain_url,
    )
    return TestimonialListResponse(
        message="Testimonials fetched successfully",
        testimonials=[testimonial_to_response(t) for t in testimonials],
    )


@router.get(
    "/{testimonial_id}",
    summary="Get a testimonial",
    responses={
        200: {"description": "Testimonial details"},
        404: {"description": "Testimonial not found"},
    },
)
async def get_testimonial(
    testimonial_id: UUID,
    session: DBSession,
) -> TestimonialEnvelope:
    query = TestimonialQuery(TestimonialRepositorySQLAlchemy(session))
    testimonial = await query.get_testimonial(testimonial_id)
    return TestimonialEnvelope(
        message="Testimonial fetched successfully",
        testimonial=testimonial_to_response(testimonial),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a testimonial",
    responses={
        201: {"description": "Testimonial created"},
        400: {"description": "Missing fields or rating outside 1-5"},
        401: {"description": "Not authenticated"},
        403: {"description": "Creating for another user is not allowed"},
        500: {"description": "Media host failure"},
    },
)
async def create_testimonial(  # NOQA: PLR0913
    user: ContentEditor,
    session: DBSession,
    media: MediaService,
    name: Annotated[str, Form(max_length=200)],
    review: Annotated[str, Form()],
    rating: Annotated[int, Form()],
    role: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    user_id: Annotated[UUID | None, Form()] = None,
    is_active: Annotated[bool, Form()] = True,
    image: UploadFile | None = None,
) -> TestimonialEnvelope:
    """
    Create a testimonial with an optional photo.

    The testimonial is added to the owner's homepage, which is created on
    first use.
    """
    upload = await read_upload(image)

    command = CreateTestimonialCommand(
        testimonial_repository=TestimonialRepositorySQLAlchemy(session),
        home_page_repository=HomePageRepositorySQLAlchemy(session),
        user_repository=UserRepositorySQLAlchemy(session),
        media_service=media,
    )
    try:
        testimonial = await command.execute(
            requesting_user=user,
            name=name,
            review=review,
            rating=rating,
            role=role,
            image=upload,
            domain_url=domain_url,
            user_id=user_id,
            is_active=is_active,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return TestimonialEnvelope(
        message="Testimonial created successfully",
        testimonial=testimonial_to_response(testimonial),
    )


@router.put(
    "/{testimonial_id}",
    summary="Update a testimonial",
    responses={
        200: {"description": "Testimonial updated"},
        400: {"description": "Rating outside 1-5"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owner"},
        404: {"description": "Testimonial not found"},
    },
)
async def update_testimonial(  # NOQA: PLR0913
    testimonial_id: UUID,
    user: ContentEditor,
    session: DBSession,
    media: MediaService,
    name: Annotated[str | None, Form(max_length=200)] = None,
    role: Annotated[str | None, Form()] = None,
    review: Annotated[str | None, Form()] = None,
    rating: Annotated[int | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    is_active: Annotated[bool | None, Form()] = None,
    image: UploadFile | None = None,
) -> TestimonialEnvelope:
    upload = await read_upload(image)

    command = UpdateTestimonialCommand(TestimonialRepositorySQLAlchemy(session), media)
    try:
        testimonial = await command.execute(
            testimonial_id=testimonial_id,
            requesting_user=user,
            name=name,
            role=role,
            review=review,
            rating=rating,
            domain_url=domain_url,
            is_active=is_active,
            image=upload,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return TestimonialEnvelope(
        message="Testimonial updated successfully",
        testimonial=testimonial_to_response(testimonial),
    )


@router.delete(
    "/{testimonial_id}",
    summary="Delete a testimonial",
    responses={
        200: {"description": "Testimonial deleted"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owner"},
        404: {"description": "Testimonial not found"},
    },
)
async def delete_testimonial(
    testimonial_id: UUID,
    user: ContentEditor,
    session: DBSession,
    media: MediaService,
) -> MessageResponse:
    command = DeleteTestimonialCommand(
        testimonial_repository=TestimonialRepositorySQLAlchemy(session),
        home_page_repository=HomePageRepositorySQLAlchemy(session),
        media_service=media,
    )
    try:
        await command.execute(testimonial_id, requesting_user=user)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Testimonial deleted successfully")
