"""Application queries (read-only use cases)."""

from coachsite.application.queries.homepage import (
    BannerQuery,
    HomePageQuery,
    HomePageView,
    TestimonialQuery,
)

__all__ = [
    "BannerQuery",
    "HomePageQuery",
    "HomePageView",
    "TestimonialQuery",
]
