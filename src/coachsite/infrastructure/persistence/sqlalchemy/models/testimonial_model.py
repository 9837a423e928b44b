"""SQLAlchemy model for Testimonial entity."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coachsite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TestimonialModel(Base, TimestampMixin):
    __tablename__ = "testimonials"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    home_page_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("home_pages.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str | None] = mapped_column(String(255), nullable=True)
    review: Mapped[str] = mapped_column(Text, nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    domain_url: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    image_public_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<TestimonialModel(id={self.id}, name={self.name})>"
