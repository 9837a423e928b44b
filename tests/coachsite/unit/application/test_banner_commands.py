"""Unit tests for banner commands, including media compensation."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from coachsite.application.commands.homepage import (
    CreateBannerCommand,
    DeleteBannerCommand,
    UpdateBannerCommand,
)
from coachsite.application.services import MediaAssetService
from coachsite.domain.homepage import (
    Banner,
    BannerNotFoundError,
    ContentAccessDeniedError,
    ContentOwnerNotFoundError,
    HomePage,
    MissingMediaError,
)
from coachsite.domain.shared.exceptions import ForbiddenError, ValidationError
from coachsite_identity import User, UserRole
from tests.shared.fixtures.fakes import FakeMediaStorage, image_upload


def _user(role: UserRole = UserRole.USER) -> User:
    return User.create(f"{uuid4().hex[:8]}@example.com", name="Coach", role=role)


class BannerCommandTestBase:
    def setup_method(self):
        self.banner_repo = AsyncMock()
        self.home_page_repo = AsyncMock()
        self.home_page_repo.find_by_user_id.return_value = None
        self.user_repo = AsyncMock()
        self.storage = FakeMediaStorage()
        self.media = MediaAssetService(self.storage)
        self.owner = _user()

    async def _stored_banner(self) -> Banner:
        image = await self.storage.upload(image_upload("old.png"), "banners")
        banner = Banner.create(
            user_id=self.owner.id,
            home_page_id=uuid4(),
            title="Old title",
            image=image,
        )
        self.banner_repo.find_by_id.return_value = banner
        return banner


class TestCreateBanner(BannerCommandTestBase):
    def setup_method(self):
        super().setup_method()
        self.command = CreateBannerCommand(
            banner_repository=self.banner_repo,
            home_page_repository=self.home_page_repo,
            user_repository=self.user_repo,
            media_service=self.media,
        )

    @pytest.mark.asyncio
    async def test_creates_banner_and_links_it(self):
        banner = await self.command.execute(
            requesting_user=self.owner,
            title="Admissions open",
            main_image=image_upload("main.png"),
            side_image=image_upload("side.png"),
        )

        assert banner.user_id == self.owner.id
        assert banner.side_image is not None
        self.banner_repo.save.assert_awaited_once_with(banner)

        home_page = self.home_page_repo.save.call_args[0][0]
        assert home_page.banner_ids == [banner.id]
        assert banner.home_page_id == home_page.id

    @pytest.mark.asyncio
    async def test_reuses_existing_home_page(self):
        existing = HomePage.create(self.owner.id)
        self.home_page_repo.find_by_user_id.return_value = existing

        banner = await self.command.execute(
            requesting_user=self.owner,
            title="Admissions open",
            main_image=image_upload(),
        )

        assert banner.home_page_id == existing.id
        assert existing.banner_ids == [banner.id]

    @pytest.mark.asyncio
    async def test_domain_url_defaults_to_owner_site(self):
        self.owner.update_profile(domain_url="coach.example.com")

        banner = await self.command.execute(
            requesting_user=self.owner,
            title="Admissions open",
            main_image=image_upload(),
        )

        assert banner.domain_url == "coach.example.com"

    @pytest.mark.asyncio
    async def test_main_image_required(self):
        with pytest.raises(MissingMediaError):
            await self.command.execute(
                requesting_user=self.owner,
                title="Admissions open",
                main_image=None,
            )

        self.banner_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_title_rejected_before_upload(self):
        with pytest.raises(ValidationError):
            await self.command.execute(
                requesting_user=self.owner,
                title="  ",
                main_image=image_upload(),
            )

        assert self.storage.stored == {}

    @pytest.mark.asyncio
    async def test_user_cannot_create_for_someone_else(self):
        with pytest.raises(ForbiddenError):
            await self.command.execute(
                requesting_user=self.owner,
                title="Admissions open",
                main_image=image_upload(),
                user_id=uuid4(),
            )

        assert self.storage.stored == {}

    @pytest.mark.asyncio
    async def test_admin_creates_for_another_user(self):
        admin = _user(UserRole.ADMIN)
        self.user_repo.find_by_id.return_value = self.owner

        banner = await self.command.execute(
            requesting_user=admin,
            title="Admissions open",
            main_image=image_upload(),
            user_id=self.owner.id,
        )

        assert banner.user_id == self.owner.id

    @pytest.mark.asyncio
    async def test_admin_target_must_exist(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(ContentOwnerNotFoundError):
            await self.command.execute(
                requesting_user=_user(UserRole.ADMIN),
                title="Admissions open",
                main_image=image_upload(),
                user_id=uuid4(),
            )

    @pytest.mark.asyncio
    async def test_failed_write_removes_uploads(self):
        self.banner_repo.save.side_effect = RuntimeError("database down")

        with pytest.raises(RuntimeError, match="database down"):
            await self.command.execute(
                requesting_user=self.owner,
                title="Admissions open",
                main_image=image_upload("main.png"),
                side_image=image_upload("side.png"),
            )

        assert self.storage.stored == {}
        assert len(self.storage.deleted) == 2


class TestUpdateBanner(BannerCommandTestBase):
    def setup_method(self):
        super().setup_method()
        self.command = UpdateBannerCommand(self.banner_repo, self.media)

    @pytest.mark.asyncio
    async def test_merges_fields(self):
        banner = await self._stored_banner()

        updated = await self.command.execute(
            banner.id,
            requesting_user=self.owner,
            description="New description",
        )

        assert updated.title == "Old title"
        assert updated.description == "New description"
        self.banner_repo.save.assert_awaited_once_with(banner)

    @pytest.mark.asyncio
    async def test_replaced_image_removed_after_save(self):
        banner = await self._stored_banner()
        old_image = banner.image

        await self.command.execute(
            banner.id,
            requesting_user=self.owner,
            main_image=image_upload("new.png"),
        )

        assert banner.image != old_image
        assert self.storage.deleted == [old_image.public_id]
        assert banner.image.public_id in self.storage.stored

    @pytest.mark.asyncio
    async def test_failed_write_keeps_old_image(self):
        banner = await self._stored_banner()
        old_image = banner.image
        self.banner_repo.save.side_effect = RuntimeError("database down")

        with pytest.raises(RuntimeError):
            await self.command.execute(
                banner.id,
                requesting_user=self.owner,
                main_image=image_upload("new.png"),
            )

        assert list(self.storage.stored) == [old_image.public_id]

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self):
        banner = await self._stored_banner()

        with pytest.raises(ContentAccessDeniedError):
            await self.command.execute(
                banner.id,
                requesting_user=_user(),
                main_image=image_upload("new.png"),
            )

        assert len(self.storage.stored) == 1

    @pytest.mark.asyncio
    async def test_admin_may_edit_any(self):
        banner = await self._stored_banner()

        await self.command.execute(
            banner.id,
            requesting_user=_user(UserRole.ADMIN),
            is_active=False,
        )

        assert not banner.is_active

    @pytest.mark.asyncio
    async def test_not_found(self):
        self.banner_repo.find_by_id.return_value = None

        with pytest.raises(BannerNotFoundError):
            await self.command.execute(uuid4(), requesting_user=self.owner)


class TestDeleteBanner(BannerCommandTestBase):
    def setup_method(self):
        super().setup_method()
        self.command = DeleteBannerCommand(
            self.banner_repo,
            self.home_page_repo,
            self.media,
        )

    @pytest.mark.asyncio
    async def test_deletes_unlinks_and_removes_media(self):
        banner = await self._stored_banner()
        home_page = HomePage.create(self.owner.id)
        home_page.add_banner(banner.id)
        self.home_page_repo.find_by_user_id.return_value = home_page

        await self.command.execute(banner.id, requesting_user=self.owner)

        self.banner_repo.delete.assert_awaited_once_with(banner.id)
        assert home_page.banner_ids == []
        assert self.storage.stored == {}

    @pytest.mark.asyncio
    async def test_media_failure_does_not_abort(self):
        banner = await self._stored_banner()
        self.storage.fail_deletes = True

        await self.command.execute(banner.id, requesting_user=self.owner)

        self.banner_repo.delete.assert_awaited_once_with(banner.id)

    @pytest.mark.asyncio
    async def test_second_delete_not_found(self):
        self.banner_repo.find_by_id.return_value = None

        with pytest.raises(BannerNotFoundError):
            await self.command.execute(uuid4(), requesting_user=self.owner)

    @pytest.mark.asyncio
    async def test_non_owner_forbidden(self):
        banner = await self._stored_banner()

        with pytest.raises(ContentAccessDeniedError):
            await self.command.execute(banner.id, requesting_user=_user())

        self.banner_repo.delete.assert_not_awaited()

