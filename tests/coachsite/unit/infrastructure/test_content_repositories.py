"""Tests for the SQLAlchemy homepage content repositories on SQLite."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from coachsite.domain.homepage import Banner, HomePage, Testimonial
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.infrastructure.persistence.sqlalchemy import (
    BannerRepositorySQLAlchemy,
    HomePageRepositorySQLAlchemy,
    TestimonialRepositorySQLAlchemy,
)

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_banner(user_id, home_page_id, title, minutes=0, domain_url=None):
    return Banner(
        user_id=user_id,
        home_page_id=home_page_id,
        title=title,
        image=MediaAsset(url=f"https://cdn.test/{title}.png", public_id=title),
        domain_url=domain_url,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


class TestHomePageRepository:
    @pytest.mark.asyncio
    async def test_save_and_find_by_user(self, db_session):
        repo = HomePageRepositorySQLAlchemy(db_session)
        home_page = HomePage.create(uuid4())
        first, second = uuid4(), uuid4()
        home_page.add_banner(first)
        home_page.add_banner(second)
        home_page.add_testimonial(first)

        await repo.save(home_page)
        found = await repo.find_by_user_id(home_page.user_id)

        assert found == home_page
        assert found.banner_ids == [first, second]
        assert found.testimonial_ids == [first]

    @pytest.mark.asyncio
    async def test_update_reference_lists(self, db_session):
        repo = HomePageRepositorySQLAlchemy(db_session)
        home_page = HomePage.create(uuid4())
        banner_id = uuid4()
        home_page.add_banner(banner_id)
        await repo.save(home_page)

        home_page.remove_banner(banner_id)
        await repo.save(home_page)
        db_session.expire_all()

        found = await repo.find_by_user_id(home_page.user_id)
        assert found.banner_ids == []

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        repo = HomePageRepositorySQLAlchemy(db_session)
        home_page = HomePage.create(uuid4())
        await repo.save(home_page)

        await repo.delete(home_page.id)

        assert await repo.find_by_user_id(home_page.user_id) is None


class TestBannerRepository:
    def setup_method(self):
        self.user_id = uuid4()
        self.home_page_id = uuid4()

    @pytest.mark.asyncio
    async def test_round_trip_keeps_media(self, db_session):
        repo = BannerRepositorySQLAlchemy(db_session)
        banner = make_banner(self.user_id, self.home_page_id, "admissions")
        banner.replace_side_image(
            MediaAsset(url="https://cdn.test/side.png", public_id="side"),
        )

        await repo.save(banner)
        found = await repo.find_by_id(banner.id)

        assert found.title == "admissions"
        assert found.image.public_id == "admissions"
        assert found.side_image.public_id == "side"

    @pytest.mark.asyncio
    async def test_find_by_ids_keeps_requested_order(self, db_session):
        repo = BannerRepositorySQLAlchemy(db_session)
        banners = [
            make_banner(self.user_id, self.home_page_id, title, minutes)
            for minutes, title in enumerate(["a", "b", "c"])
        ]
        for banner in banners:
            await repo.save(banner)

        wanted = [banners[2].id, uuid4(), banners[0].id]
        found = await repo.find_by_ids(wanted)

        assert [b.title for b in found] == ["c", "a"]

    @pytest.mark.asyncio
    async def test_find_all_filters_newest_first(self, db_session):
        repo = BannerRepositorySQLAlchemy(db_session)
        other_user = uuid4()
        await repo.save(
            make_banner(self.user_id, self.home_page_id, "old", 0, "a.example"),
        )
        await repo.save(
            make_banner(self.user_id, self.home_page_id, "new", 5, "a.example"),
        )
        await repo.save(make_banner(other_user, uuid4(), "other", 10, "b.example"))

        everything = await repo.find_all()
        mine = await repo.find_all(user_id=self.user_id)
        by_domain = await repo.find_all(domain_url="b.example")

        assert [b.title for b in everything] == ["other", "new", "old"]
        assert [b.title for b in mine] == ["new", "old"]
        assert [b.title for b in by_domain] == ["other"]

    @pytest.mark.asyncio
    async def test_delete(self, db_session):
        repo = BannerRepositorySQLAlchemy(db_session)
        banner = make_banner(self.user_id, self.home_page_id, "gone")
        await repo.save(banner)

        await repo.delete(banner.id)

        assert await repo.find_by_id(banner.id) is None


class TestTestimonialRepository:
    @pytest.mark.asyncio
    async def test_round_trip_without_image(self, db_session):
        repo = TestimonialRepositorySQLAlchemy(db_session)
        testimonial = Testimonial.create(
            user_id=uuid4(),
            home_page_id=uuid4(),
            name="A",
            review="Great teachers",
            rating=5,
            role="Student",
        )

        await repo.save(testimonial)
        found = await repo.find_by_id(testimonial.id)

        assert found.name == "A"
        assert found.rating == 5
        assert found.role == "Student"
        assert found.image is None

    @pytest.mark.asyncio
    async def test_update_rating(self, db_session):
        repo = TestimonialRepositorySQLAlchemy(db_session)
        testimonial = Testimonial.create(
            user_id=uuid4(),
            home_page_id=uuid4(),
            name="A",
            review="Good",
            rating=3,
        )
        await repo.save(testimonial)

        testimonial.update_details(rating=4)
        await repo.save(testimonial)

        found = await repo.find_by_id(testimonial.id)
        assert found.rating == 4

    @pytest.mark.asyncio
    async def test_find_by_ids_empty(self, db_session):
        repo = TestimonialRepositorySQLAlchemy(db_session)

        assert await repo.find_by_ids([]) == []
