from coachsite.infrastructure.persistence.sqlalchemy.repositories.banner_repository import (  # NOQA: E501
    BannerRepositorySQLAlchemy,
)
from coachsite.infrastructure.persistence.sqlalchemy.repositories.home_page_repository import (  # NOQA: E501
    HomePageRepositorySQLAlchemy,
)
from coachsite.infrastructure.persistence.sqlalchemy.repositories.testimonial_repository import (  # NOQA: E501
    TestimonialRepositorySQLAlchemy,
)

__all__ = [
    "BannerRepositorySQLAlchemy",
    "HomePageRepositorySQLAlchemy",
    "TestimonialRepositorySQLAlchemy",
]
