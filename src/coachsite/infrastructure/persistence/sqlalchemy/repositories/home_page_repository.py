"""SQLAlchemy implementation of HomePageRepository."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from coachsite.domain.homepage import HomePage, HomePageRepository
from coachsite.infrastructure.persistence.sqlalchemy.models import HomePageModel

logger = logging.getLogger(__name__)


class HomePageRepositorySQLAlchemy(HomePageRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_user_id(self, user_id: UUID) -> HomePage | None:
        stmt = select(HomePageModel).where(HomePageModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def save(self, home_page: HomePage) -> None:
        existing = await self._find_model_by_id(home_page.id)

        if existing:
            self._update_model(existing, home_page)
            logger.debug("Updated home page: %s", home_page.id)
        else:
            model = HomePageModel(
                id=home_page.id,
                user_id=home_page.user_id,
                created_at=home_page.created_at,
            )
            self._update_model(model, home_page)
            self._session.add(model)
            logger.info(
                "Created home page %s for user %s",
                home_page.id,
                home_page.user_id,
            )

        await self._session.flush()

    async def delete(self, home_page_id: UUID) -> None:
        model = await self._find_model_by_id(home_page_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted home page: %s", home_page_id)

    async def _find_model_by_id(self, home_page_id: UUID) -> HomePageModel | None:
        stmt = select(HomePageModel).where(HomePageModel.id == home_page_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: HomePageModel) -> HomePage:
        return HomePage.reconstitute(
            id=model.id,
            user_id=model.user_id,
            banner_ids=[UUID(value) for value in model.banner_ids or []],
            testimonial_ids=[UUID(value) for value in model.testimonial_ids or []],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _update_model(self, model: HomePageModel, home_page: HomePage) -> None:
        # Assign new lists so the JSON columns are flagged as changed.
        model.banner_ids = [str(value) for value in home_page.banner_ids]
        model.testimonial_ids = [str(value) for value in home_page.testimonial_ids]
        model.updated_at = home_page.updated_at
