"""SQLAlchemy model for HomePage aggregate."""

from uuid import UUID

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import JSON

from coachsite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class HomePageModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting HomePage aggregates.

    Content references are ordered lists of ids stored as JSON.
    """

    __tablename__ = "home_pages"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        unique=True,
        nullable=False,
        index=True,
    )
    banner_ids: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    testimonial_ids: Mapped[list[str]] = mapped_column(
        JSON,
        default=list,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<HomePageModel(id={self.id}, user_id={self.user_id})>"
