from coachsite.application.queries.homepage.content_queries import (
    BannerQuery,
    TestimonialQuery,
)
from coachsite.application.queries.homepage.home_page_query import (
    HomePageQuery,
    HomePageView,
)

__all__ = [
    "BannerQuery",
    "HomePageQuery",
    "HomePageView",
    "TestimonialQuery",
]
