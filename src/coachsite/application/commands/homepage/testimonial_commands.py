"""Testimonial commands: create, update and delete."""

import logging
from uuid import UUID

from coachsite.application.commands.homepage.content_access import (
    ensure_can_modify,
    get_or_create_home_page,
    resolve_owner,
)
from coachsite.application.ports import MediaUpload
from coachsite.application.services.media_asset_service import MediaAssetService
from coachsite.domain.homepage import (
    HomePageRepository,
    Testimonial,
    TestimonialNotFoundError,
    TestimonialRepository,
)
from coachsite_identity import User, UserRepository

logger = logging.getLogger(__name__)

TESTIMONIAL_FOLDER = "testimonials"


class CreateTestimonialCommand:
    """Command to add a testimonial to a user's homepage."""

    def __init__(
        self,
        testimonial_repository: TestimonialRepository,
        home_page_repository: HomePageRepository,
        user_repository: UserRepository,
        media_service: MediaAssetService,
    ):
        self._testimonial_repo = testimonial_repository
        self._home_page_repo = home_page_repository
        self._user_repo = user_repository
        self._media = media_service

    async def execute(  # NOQA: PLR0913
        self,
        requesting_user: User,
        name: str,
        review: str,
        rating: int,
        role: str | None = None,
        image: MediaUpload | None = None,
        domain_url: str | None = None,
        user_id: UUID | None = None,
        is_active: bool = True,
    ) -> Testimonial:
        owner = await resolve_owner(requesting_user, user_id, self._user_repo)
        home_page = await get_or_create_home_page(self._home_page_repo, owner.id)

        # Validate the fields before anything is uploaded.
        testimonial = Testimonial.create(
            user_id=owner.id,
            home_page_id=home_page.id,
            name=name,
            review=review,
            rating=rating,
            role=role,
            domain_url=domain_url or owner.domain_url,
            is_active=is_active,
        )

        asset = await self._media.upload(image, TESTIMONIAL_FOLDER)

        try:
            if asset:
                testimonial.replace_image(asset)
            await self._testimonial_repo.save(testimonial)
            home_page.add_testimonial(testimonial.id)
            await self._home_page_repo.save(home_page)
        except Exception:
            await self._media.discard(asset)
            raise

        logger.info("Created testimonial %s for user %s", testimonial.id, owner.id)
        return testimonial


class UpdateTestimonialCommand:
    """Command to merge changes into a testimonial."""

    def __init__(
        self,
        testimonial_repository: TestimonialRepository,
        media_service: MediaAssetService,
    ):
        self._testimonial_repo = testimonial_repository
        self._media = media_service

    async def execute(  # NOQA: PLR0913
        self,
        testimonial_id: UUID,
        requesting_user: User,
        name: str | None = None,
        role: str | None = None,
        review: str | None = None,
        rating: int | None = None,
        domain_url: str | None = None,
        is_active: bool | None = None,
        image: MediaUpload | None = None,
    ) -> Testimonial:
        testimonial = await self._testimonial_repo.find_by_id(testimonial_id)
        if testimonial is None:
            raise TestimonialNotFoundError(testimonial_id)
        ensure_can_modify(
            requesting_user,
            testimonial.user_id,
            "testimonial",
            testimonial_id,
        )

        testimonial.update_details(
            name=name,
            role=role,
            review=review,
            rating=rating,
            domain_url=domain_url,
            is_active=is_active,
        )

        new_image = await self._media.upload(image, TESTIMONIAL_FOLDER)
        previous = None

        try:
            if new_image:
                previous = testimonial.replace_image(new_image)
            await self._testimonial_repo.save(testimonial)
        except Exception:
            await self._media.discard(new_image)
            raise

        await self._media.discard(previous)
        return testimonial


class DeleteTestimonialCommand:
    """Command to delete a testimonial, unlink it and remove its photo."""

    def __init__(
        self,
        testimonial_repository: TestimonialRepository,
        home_page_repository: HomePageRepository,
        media_service: MediaAssetService,
    ):
        self._testimonial_repo = testimonial_repository
        self._home_page_repo = home_page_repository
        self._media = media_service

    async def execute(self, testimonial_id: UUID, requesting_user: User) -> None:
        testimonial = await self._testimonial_repo.find_by_id(testimonial_id)
        if testimonial is None:
            raise TestimonialNotFoundError(testimonial_id)
        ensure_can_modify(
            requesting_user,
            testimonial.user_id,
            "testimonial",
            testimonial_id,
        )

        home_page = await self._home_page_repo.find_by_user_id(testimonial.user_id)
        if home_page:
            home_page.remove_testimonial(testimonial.id)
            await self._home_page_repo.save(home_page)

        await self._testimonial_repo.delete(testimonial.id)
        logger.info("Deleted testimonial %s", testimonial.id)

        await self._media.discard_all(testimonial.media)
