"""Homepage content domain.

A coach's public homepage is a HomePage aggregate that references
ordered lists of banners and testimonials. Each piece of content owns
its own hosted images.
"""

from coachsite.domain.homepage.aggregates import HomePage
from coachsite.domain.homepage.entities import Banner, Testimonial
from coachsite.domain.homepage.exceptions import (
    BannerNotFoundError,
    ContentAccessDeniedError,
    ContentOwnerNotFoundError,
    HomePageNotFoundError,
    InvalidRatingError,
    MissingMediaError,
    TestimonialNotFoundError,
)
from coachsite.domain.homepage.repositories import (
    BannerRepository,
    HomePageRepository,
    TestimonialRepository,
)

__all__ = [
    "Banner",
    "BannerNotFoundError",
    "BannerRepository",
    "ContentAccessDeniedError",
    "ContentOwnerNotFoundError",
    "HomePage",
    "HomePageNotFoundError",
    "HomePageRepository",
    "InvalidRatingError",
    "MissingMediaError",
    "Testimonial",
    "TestimonialNotFoundError",
    "TestimonialRepository",
]
