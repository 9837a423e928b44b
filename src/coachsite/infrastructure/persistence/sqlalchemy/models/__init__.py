"""SQLAlchemy models for persistence layer."""

from coachsite.infrastructure.persistence.sqlalchemy.models.banner_model import (
    BannerModel,
)
from coachsite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from coachsite.infrastructure.persistence.sqlalchemy.models.home_page_model import (
    HomePageModel,
)
from coachsite.infrastructure.persistence.sqlalchemy.models.testimonial_model import (
    TestimonialModel,
)

__all__ = [
    "Base",
    "BannerModel",
    "HomePageModel",
    "TestimonialModel",
    "TimestampMixin",
]
