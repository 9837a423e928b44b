"""Banners router: public listing and owner-managed hero banners."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Form, Query, UploadFile, status

from coachsite.application.commands.homepage import (
    CreateBannerCommand,
    DeleteBannerCommand,
    UpdateBannerCommand,
)
from coachsite.application.queries import BannerQuery
from coachsite.infrastructure.persistence.sqlalchemy import (
    BannerRepositorySQLAlchemy,
    HomePageRepositorySQLAlchemy,
)
from coachsite.presentation.api.dependencies import (
    ContentEditor,
    DBSession,
    MediaService,
)
from coachsite.presentation.api.schemas.banners import (
    BannerEnvelope,
    BannerListResponse,
    banner_to_response,
)
from coachsite.presentation.api.schemas.common import MessageResponse
from coachsite.presentation.api.uploads import read_upload
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

router = APIRouter()


@router.get(
    "",
    summary="List banners",
    responses={200: {"description": "Banners, newest first"}},
)
async def list_banners(
    session: DBSession,
    user_id: Annotated[UUID | None, Query()] = None,
    domain_url: Annotated[str | None, Query()] = None,
) -> BannerListResponse:
    """List banners, optionally filtered by owner or site domain."""
    query = BannerQuery(BannerRepositorySQLAlchemy(session))
    banners = await query.list_banners(user_id=user_id, domain_url=domain_url)
    return BannerListResponse(
        message="Banners fetched successfully",
        banners=[banner_to_response(b) for b in banners],
    )


@router.get(
    "/{banner_id}",
    summary="Get a banner",
    responses={
        200: {"description": "Banner details"},
        404: {"description": "Banner not found"},
    },
)
async def get_banner(banner_id: UUID, session: DBSession) -> BannerEnvelope:
    banner = await BannerQuery(BannerRepositorySQLAlchemy(session)).get_banner(
        banner_id,
    )
    return BannerEnvelope(
        message="Banner fetched successfully",
        banner=banner_to_response(banner),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a banner",
    responses={
        201: {"description": "Banner created"},
        400: {"description": "Missing title or main image"},
        401: {"description": "Not authenticated"},
        403: {"description": "Creating for another user is not allowed"},
        500: {"description": "Media host failure"},
    },
)
async def create_banner(  # NOQA: PLR0913
    user: ContentEditor,
    session: DBSession,
    media: MediaService,
    title: Annotated[str, Form(max_length=200)],
    image: UploadFile | None = None,
    side_image: UploadFile | None = None,
    description: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    user_id: Annotated[UUID | None, Form()] = None,
    is_active: Annotated[bool, Form()] = True,
) -> BannerEnvelope:
    """
    Create a banner with a required main image and an optional side image.

    The banner is added to the owner's homepage, which is created on first
    use. Administrators may pass `user_id` to create for another user.
    """
    main_upload = await read_upload(image)
    side_upload = await read_upload(side_image)

    command = CreateBannerCommand(
        banner_repository=BannerRepositorySQLAlchemy(session),
        home_page_repository=HomePageRepositorySQLAlchemy(session),
        user_repository=UserRepositorySQLAlchemy(session),
        media_service=media,
    )
    try:
        banner = await command.execute(
            requesting_user=user,
            title=title,
            main_image=main_upload,
            description=description,
            side_image=side_upload,
            domain_url=domain_url,
            user_id=user_id,
            is_active=is_active,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return BannerEnvelope(
        message="Banner created successfully",
        banner=banner_to_response(banner),
    )


@router.put(
    "/{banner_id}",
    summary="Update a banner",
    responses={
        200: {"description": "Banner updated"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owner"},
        404: {"description": "Banner not found"},
    },
)
async def update_banner(  # NOQA: PLR0913
    banner_id: UUID,
    user: ContentEditor,
    session: DBSession,
    media: MediaService,
    title: Annotated[str | None, Form(max_length=200)] = None,
    description: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    is_active: Annotated[bool | None, Form()] = None,
    image: UploadFile | None = None,
    side_image: UploadFile | None = None,
) -> BannerEnvelope:
    """Merge the supplied fields; new images replace the stored ones."""
    main_upload = await read_upload(image)
    side_upload = await read_upload(side_image)

    command = UpdateBannerCommand(BannerRepositorySQLAlchemy(session), media)
    try:
        banner = await command.execute(
            banner_id=banner_id,
            requesting_user=user,
            title=title,
            description=description,
            domain_url=domain_url,
            is_active=is_active,
            main_image=main_upload,
            side_image=side_upload,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return BannerEnvelope(
        message="Banner updated successfully",
        banner=banner_to_response(banner),
    )


@router.delete(
    "/{banner_id}",
    summary="Delete a banner",
    responses={
        200: {"description": "Banner deleted"},
        401: {"description": "Not authenticated"},
        403: {"description": "Not the owner"},
        404: {"description": "Banner not found"},
    },
)
async def delete_banner(
    banner_id: UUID,
    user: ContentEditor,
    session: DBSession,
    media: MediaService,
) -> MessageResponse:
    command = DeleteBannerCommand(
        banner_repository=BannerRepositorySQLAlchemy(session),
        home_page_repository=HomePageRepositorySQLAlchemy(session),
        media_service=media,
    )
    try:
        await command.execute(banner_id, requesting_user=user)
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Banner deleted successfully")
