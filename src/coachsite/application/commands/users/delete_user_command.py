import logging
from uuid import UUID

from coachsite.application.services.media_asset_service import MediaAssetService
from coachsite.domain.homepage import (
    BannerRepository,
    HomePageRepository,
    TestimonialRepository,
)
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite_identity import CannotDeleteSelfError, UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to delete a user together with their homepage content."""

    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        home_page_repository: HomePageRepository,
        banner_repository: BannerRepository,
        testimonial_repository: TestimonialRepository,
        media_service: MediaAssetService,
    ):
        self._user_repo = user_repository
        self._home_page_repo = home_page_repository
        self._banner_repo = banner_repository
        self._testimonial_repo = testimonial_repository
        self._media = media_service

    async def execute(
        self,
        user_id: UUID,
        requesting_admin_id: UUID | None = None,
    ) -> None:
        """Delete the user, their content rows, then their hosted images.

        ``requesting_admin_id`` is set when an administrator deletes
        someone else's account; administrators cannot delete themselves
        that way.
        """
        if requesting_admin_id is not None and user_id == requesting_admin_id:
            raise CannotDeleteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        media: list[MediaAsset | None] = [user.avatar]

        for banner in await self._banner_repo.find_all(user_id=user_id):
            media.extend(banner.media)
            await self._banner_repo.delete(banner.id)

        for testimonial in await self._testimonial_repo.find_all(user_id=user_id):
            media.extend(testimonial.media)
            await self._testimonial_repo.delete(testimonial.id)

        home_page = await self._home_page_repo.find_by_user_id(user_id)
        if home_page:
            await self._home_page_repo.delete(home_page.id)

        await self._user_repo.delete(user_id)
        logger.info("Deleted user %s and their homepage content", user_id)

        await self._media.discard_all(media)
