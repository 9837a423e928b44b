"""Banner commands: create, update and delete with hosted images."""

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
    Banner,
    BannerNotFoundError,
    BannerRepository,
    HomePageRepository,
    MissingMediaError,
)
from coachsite.domain.shared.exceptions import ValidationError
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite_identity import User, UserRepository

logger = logging.getLogger(__name__)

BANNER_FOLDER = "banners"


class CreateBannerCommand:
    """Command to add a banner to a user's homepage."""

    def __init__(
        self,
        banner_repository: BannerRepository,
        home_page_repository: HomePageRepository,
        user_repository: UserRepository,
        media_service: MediaAssetService,
    ):
        self._banner_repo = banner_repository
        self._home_page_repo = home_page_repository
        self._user_repo = user_repository
        self._media = media_service

    async def execute(  # NOQA: PLR0913
        self,
        requesting_user: User,
        title: str,
        main_image: MediaUpload | None,
        description: str | None = None,
        side_image: MediaUpload | None = None,
        domain_url: str | None = None,
        user_id: UUID | None = None,
        is_active: bool = True,
    ) -> Banner:
        """Upload the images, then store the banner and link it.

        Raises
        ------
        ValidationError
            If the title is blank
        MissingMediaError
            If no main image was supplied
        ForbiddenError
            If creating for another user without permission
        MediaStorageError
            If an upload fails
        """
        if not title or not title.strip():
            msg = "Title is required"
            raise ValidationError(msg)
        if main_image is None or main_image.is_empty:
            raise MissingMediaError("Main image")

        owner = await resolve_owner(requesting_user, user_id, self._user_repo)

        image, side = await self._media.upload_many(
            [(main_image, BANNER_FOLDER), (side_image, BANNER_FOLDER)],
        )
        if image is None:
            raise MissingMediaError("Main image")

        try:
            home_page = await get_or_create_home_page(self._home_page_repo, owner.id)
            banner = Banner.create(
                user_id=owner.id,
                home_page_id=home_page.id,
                title=title,
                image=image,
                description=description,
                side_image=side,
                domain_url=domain_url or owner.domain_url,
                is_active=is_active,
            )
            await self._banner_repo.save(banner)
            home_page.add_banner(banner.id)
            await self._home_page_repo.save(home_page)
        except Exception:
            await self._media.discard_all([image, side])
            raise

        logger.info("Created banner %s for user %s", banner.id, owner.id)
        return banner


class UpdateBannerCommand:
    """Command to merge changes into a banner, optionally replacing images."""

    def __init__(
        self,
        banner_repository: BannerRepository,
        media_service: MediaAssetService,
    ):
        self._banner_repo = banner_repository
        self._media = media_service

    async def execute(  # NOQA: PLR0913
        self,
        banner_id: UUID,
        requesting_user: User,
        title: str | None = None,
        description: str | None = None,
        domain_url: str | None = None,
        is_active: bool | None = None,
        main_image: MediaUpload | None = None,
        side_image: MediaUpload | None = None,
    ) -> Banner:
        banner = await self._banner_repo.find_by_id(banner_id)
        if banner is None:
            raise BannerNotFoundError(banner_id)
        ensure_can_modify(requesting_user, banner.user_id, "banner", banner_id)

        new_image, new_side = await self._media.upload_many(
            [(main_image, BANNER_FOLDER), (side_image, BANNER_FOLDER)],
        )
        replaced: list[MediaAsset | None] = []

        try:
            banner.update_details(
                title=title,
                description=description,
                domain_url=domain_url,
                is_active=is_active,
            )
            if new_image:
                replaced.append(banner.replace_image(new_image))
            if new_side:
                replaced.append(banner.replace_side_image(new_side))
            await self._banner_repo.save(banner)
        except Exception:
            await self._media.discard_all([new_image, new_side])
            raise

        await self._media.discard_all(replaced)
        return banner


class DeleteBannerCommand:
    """Command to delete a banner, unlink it and remove its images."""

    def __init__(
        self,
        banner_repository: BannerRepository,
        home_page_repository: HomePageRepository,
        media_service: MediaAssetService,
    ):
        self._banner_repo = banner_repository
        self._home_page_repo = home_page_repository
        self._media = media_service

    async def execute(self, banner_id: UUID, requesting_user: User) -> None:
        banner = await self._banner_repo.find_by_id(banner_id)
        if banner is None:
            raise BannerNotFoundError(banner_id)
        ensure_can_modify(requesting_user, banner.user_id, "banner", banner_id)

        home_page = await self._home_page_repo.find_by_user_id(banner.user_id)
        if home_page:
            home_page.remove_banner(banner.id)
            await self._home_page_repo.save(home_page)

        await self._banner_repo.delete(banner.id)
        logger.info("Deleted banner %s", banner.id)

        await self._media.discard_all(banner.media)
