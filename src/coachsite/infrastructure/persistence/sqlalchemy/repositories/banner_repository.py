"""SQLAlchemy implementation of BannerRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachsite.domain.homepage import Banner, BannerRepository
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.infrastructure.persistence.sqlalchemy.models import BannerModel

logger = logging.getLogger(__name__)


class BannerRepositorySQLAlchemy(BannerRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, banner_id: UUID) -> Banner | None:
        model = await self._find_model_by_id(banner_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_ids(self, banner_ids: list[UUID]) -> list[Banner]:
        if not banner_ids:
            return []

        stmt = select(BannerModel).where(BannerModel.id.in_(banner_ids))
        result = await self._session.execute(stmt)
        by_id = {model.id: model for model in result.scalars().all()}

        return [
            self._map_to_domain(by_id[banner_id])
            for banner_id in banner_ids
            if banner_id in by_id
        ]

    async def find_all(
        self,
        user_id: UUID | None = None,
        domain_url: str | None = None,
    ) -> list[Banner]:
        stmt = select(BannerModel)
        if user_id is not None:
            stmt = stmt.where(BannerModel.user_id == user_id)
        if domain_url:
            stmt = stmt.where(BannerModel.domain_url == domain_url)
        stmt = stmt.order_by(BannerModel.created_at.desc())

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def save(self, banner: Banner) -> None:
        existing = await self._find_model_by_id(banner.id)

        if existing:
            self._update_model(existing, banner)
            logger.debug("Updated banner: %s", banner.id)
        else:
            model = BannerModel(
                id=banner.id,
                user_id=banner.user_id,
                home_page_id=banner.home_page_id,
                created_at=banner.created_at,
            )
            self._update_model(model, banner)
            self._session.add(model)

        await self._session.flush()

    async def delete(self, banner_id: UUID) -> None:
        model = await self._find_model_by_id(banner_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()

    async def _find_model_by_id(self, banner_id: UUID) -> BannerModel | None:
        stmt = select(BannerModel).where(BannerModel.id == banner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: BannerModel) -> Banner:
        return Banner.reconstitute(
            id=model.id,
            user_id=model.user_id,
            home_page_id=model.home_page_id,
            title=model.title,
            image=MediaAsset(url=model.image_url, public_id=model.image_public_id),
            description=model.description,
            side_image=MediaAsset.from_parts(
                model.side_image_url,
                model.side_image_public_id,
            ),
            domain_url=model.domain_url,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: BannerModel, banner: Banner) -> None:
        model.title = banner.title
        model.description = banner.description
        model.domain_url = banner.domain_url
        model.image_url = banner.image.url
        model.image_public_id = banner.image.public_id
        model.side_image_url = banner.side_image.url if banner.side_image else None
        model.side_image_public_id = (
            banner.side_image.public_id if banner.side_image else None
        )
        model.is_active = banner.is_active
        model.updated_at = banner.updated_at
