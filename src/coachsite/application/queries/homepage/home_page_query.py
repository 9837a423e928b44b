"""Homepage query - assemble everything a coach's public site renders."""

from dataclasses import dataclass
from uuid import UUID

from coachsite.domain.homepage import (
    Banner,
    BannerRepository,
    ContentOwnerNotFoundError,
    HomePage,
    HomePageNotFoundError,
    HomePageRepository,
    Testimonial,
    TestimonialRepository,
)
from coachsite_identity import User, UserRepository


@dataclass(frozen=True)
class HomePageView:
    """A homepage with its content resolved in display order."""

    home_page: HomePage
    owner: User
    banners: list[Banner]
    testimonials: list[Testimonial]


class HomePageQuery:
    """Query resolving a user's homepage aggregate."""

    def __init__(
        self,
        user_repository: UserRepository,
        home_page_repository: HomePageRepository,
        banner_repository: BannerRepository,
        testimonial_repository: TestimonialRepository,
    ):
        self._user_repo = user_repository
        self._home_page_repo = home_page_repository
        self._banner_repo = banner_repository
        self._testimonial_repo = testimonial_repository

    async def execute(self, user_id: UUID) -> HomePageView:
        """Load the homepage for ``user_id``.

        Raises
        ------
        ContentOwnerNotFoundError
            If the user does not exist
        HomePageNotFoundError
            If the user has not created any content yet
        """
        owner = await self._user_repo.find_by_id(user_id)
        if owner is None:
            raise ContentOwnerNotFoundError(user_id)

        home_page = await self._home_page_repo.find_by_user_id(user_id)
        if home_page is None:
            raise HomePageNotFoundError(user_id)

        banners = await self._banner_repo.find_by_ids(home_page.banner_ids)
        testimonials = await self._testimonial_repo.find_by_ids(
            home_page.testimonial_ids,
        )

        return HomePageView(
            home_page=home_page,
            owner=owner,
            banners=banners,
            testimonials=testimonials,
        )
