"""Banner schemas for responses."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from coachsite.domain.homepage import Banner
from coachsite.presentation.api.schemas.common import (
    MediaAssetResponse,
    media_to_response,
)


class BannerResponse(BaseModel):
    id: UUID
    user_id: UUID
    home_page_id: UUID
    title: str
    description: str | None = None
    image: MediaAssetResponse
    side_image: MediaAssetResponse | None = None
    domain_url: str | None = None
    is_active: bool
    created_at: datetime
    updated_at: datetime


class BannerEnvelope(BaseModel):
    message: str
    banner: BannerResponse


class BannerListResponse(BaseModel):
    message: str
    banners: list[BannerResponse]


def banner_to_response(banner: Banner) -> BannerResponse:
    return BannerResponse(
        id=banner.id,
        user_id=banner.user_id,
        home_page_id=banner.home_page_id,
        title=banner.title,
        description=banner.description,
        image=MediaAssetResponse(url=banner.image.url, public_id=banner.image.public_id),
        side_image=media_to_response(banner.side_image),
        domain_url=banner.domain_url,
        is_active=banner.is_active,
        created_at=banner.created_at,
        updated_at=banner.updated_at,
    )
