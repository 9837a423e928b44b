"""SQLAlchemy model for Banner entity."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from coachsite.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class BannerModel(Base, TimestampMixin):
    __tablename__ = "banners"

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
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    domain_url: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        index=True,
    )
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    image_public_id: Mapped[str] = mapped_column(String(255), nullable=False)
    side_image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    side_image_public_id: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<BannerModel(id={self.id}, title={self.title})>"
