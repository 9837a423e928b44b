"""Read-only queries for banners and testimonials."""

from uuid import UUID

from coachsite.domain.homepage import (
    Banner,
    BannerNotFoundError,
    BannerRepository,
    Testimonial,
    TestimonialNotFoundError,
    TestimonialRepository,
)


class BannerQuery:
    """Query for listing and fetching banners."""

    def __init__(self, banner_repository: BannerRepository):
        self._banner_repo = banner_repository

    async def list_banners(
        self,
        user_id: UUID | None = None,
        domain_url: str | None = None,
    ) -> list[Banner]:
        return await self._banner_repo.find_all(user_id=user_id, domain_url=domain_url)

    async def get_banner(self, banner_id: UUID) -> Banner:
        banner = await self._banner_repo.find_by_id(banner_id)
        if banner is None:
            raise BannerNotFoundError(banner_id)
        return banner


class TestimonialQuery:
    """Query for listing and fetching testimonials."""

    def __init__(self, testimonial_repository: TestimonialRepository):
        self._testimonial_repo = testimonial_repository

    async def list_testimonials(
        self,
        user_id: UUID | None = None,
        domain_url: str | None = None,
    ) -> list[Testimonial]:
        return await self._testimonial_repo.find_all(
            user_id=user_id,
            domain_url=domain_url,
        )

    async def get_testimonial(self, testimonial_id: UUID) -> Testimonial:
        testimonial = await self._testimonial_repo.find_by_id(testimonial_id)
        if testimonial is None:
            raise TestimonialNotFoundError(testimonial_id)
        return testimonial
