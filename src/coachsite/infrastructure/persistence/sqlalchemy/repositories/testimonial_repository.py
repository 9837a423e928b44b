"""SQLAlchemy implementation of TestimonialRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachsite.domain.homepage import Testimonial, TestimonialRepository
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.infrastructure.persistence.sqlalchemy.models import TestimonialModel

logger = logging.getLogger(__name__)


class TestimonialRepositorySQLAlchemy(TestimonialRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, testimonial_id: UUID) -> Testimonial | None:
        model = await self._find_model_by_id(testimonial_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_ids(self, testimonial_ids: list[UUID]) -> list[Testimonial]:
        if not testimonial_ids:
            return []

        stmt = select(TestimonialModel).where(TestimonialModel.id.in_(testimonial_ids))
        result = await self._session.execute(stmt)
        by_id = {model.id: model for model in result.scalars().all()}

        return [
            self._map_to_domain(by_id[testimonial_id])
            for testimonial_id in testimonial_ids
            if testimonial_id in by_id
        ]

    async def find_all(
        self,
        user_id: UUID | None = None,
        domain_url: str | None = None,
    ) -> list[Testimonial]:
        stmt = select(TestimonialModel)
        if user_id is not None:
            stmt = stmt.where(TestimonialModel.user_id == user_id)
        if domain_url:
            stmt = stmt.where(TestimonialModel.domain_url == domain_url)
        stmt = stmt.order_by(TestimonialModel.created_at.desc())

        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def save(self, testimonial: Testimonial) -> None:
        existing = await self._find_model_by_id(testimonial.id)

        if existing:
            self._update_model(existing, testimonial)
            logger.debug("Updated testimonial: %s", testimonial.id)
        else:
            model = TestimonialModel(
                id=testimonial.id,
                user_id=testimonial.user_id,
                home_page_id=testimonial.home_page_id,
                created_at=testimonial.created_at,
            )
            self._update_model(model, testimonial)
            self._session.add(model)

        await self._session.flush()

    async def delete(self, testimonial_id: UUID) -> None:
        model = await self._find_model_by_id(testimonial_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()

    async def _find_model_by_id(self, testimonial_id: UUID) -> TestimonialModel | None:
        stmt = select(TestimonialModel).where(TestimonialModel.id == testimonial_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: TestimonialModel) -> Testimonial:
        return Testimonial.reconstitute(
            id=model.id,
            user_id=model.user_id,
            home_page_id=model.home_page_id,
            name=model.name,
            review=model.review,
            rating=model.rating,
            role=model.role,
            image=MediaAsset.from_parts(model.image_url, model.image_public_id),
            domain_url=model.domain_url,
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: TestimonialModel, testimonial: Testimonial) -> None:
        model.name = testimonial.name
        model.role = testimonial.role
        model.review = testimonial.review
        model.rating = testimonial.rating
        model.domain_url = testimonial.domain_url
        model.image_url = testimonial.image.url if testimonial.image else None
        model.image_public_id = (
            testimonial.image.public_id if testimonial.image else None
        )
        model.is_active = testimonial.is_active
        model.updated_at = testimonial.updated_at
