"""SQLAlchemy persistence for homepage content."""

from coachsite.infrastructure.persistence.sqlalchemy.database import create_tables
from coachsite.infrastructure.persistence.sqlalchemy.models import Base
from coachsite.infrastructure.persistence.sqlalchemy.repositories import (
    BannerRepositorySQLAlchemy,
    HomePageRepositorySQLAlchemy,
    TestimonialRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "BannerRepositorySQLAlchemy",
    "HomePageRepositorySQLAlchemy",
    "TestimonialRepositorySQLAlchemy",
    "create_tables",
]
