from coachsite.domain.homepage.repositories.banner_repository import BannerRepository
from coachsite.domain.homepage.repositories.home_page_repository import (
    HomePageRepository,
)
from coachsite.domain.homepage.repositories.testimonial_repository import (
    TestimonialRepository,
)

__all__ = [
    "BannerRepository",
    "HomePageRepository",
    "TestimonialRepository",
]
