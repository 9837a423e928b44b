"""HomePage aggregate: the per-user container of homepage content."""

from datetime import datetime
from uuid import UUID, uuid4

from coachsite.domain.shared.time import utc_now


class HomePage:
    """
    Aggregate root referencing a user's banners and testimonials.

    The reference lists are ordered; the order is the display order on
    the public site. A user has at most one homepage.
    """

    def __init__(
        self,
        user_id: UUID,
        banner_ids: list[UUID] | None = None,
        testimonial_ids: list[UUID] | None = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._banner_ids = list(banner_ids or [])
        self._testimonial_ids = list(testimonial_ids or [])
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def banner_ids(self) -> list[UUID]:
        return list(self._banner_ids)

    @property
    def testimonial_ids(self) -> list[UUID]:
        return list(self._testimonial_ids)

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def add_banner(self, banner_id: UUID) -> None:
        if banner_id not in self._banner_ids:
            self._banner_ids.append(banner_id)
            self._updated_at = utc_now()

    def remove_banner(self, banner_id: UUID) -> None:
        if banner_id in self._banner_ids:
            self._banner_ids.remove(banner_id)
            self._updated_at = utc_now()

    def add_testimonial(self, testimonial_id: UUID) -> None:
        if testimonial_id not in self._testimonial_ids:
            self._testimonial_ids.append(testimonial_id)
            self._updated_at = utc_now()

    def remove_testimonial(self, testimonial_id: UUID) -> None:
        if testimonial_id in self._testimonial_ids:
            self._testimonial_ids.remove(testimonial_id)
            self._updated_at = utc_now()

    @classmethod
    def create(cls, user_id: UUID) -> "HomePage":
        return cls(user_id=user_id)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        banner_ids: list[UUID],
        testimonial_ids: list[UUID],
        created_at: datetime,
        updated_at: datetime,
    ) -> "HomePage":
        return cls(
            id=id,
            user_id=user_id,
            banner_ids=banner_ids,
            testimonial_ids=testimonial_ids,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HomePage):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"HomePage(id={self._id}, user_id={self._user_id}, "
            f"banners={len(self._banner_ids)}, "
            f"testimonials={len(self._testimonial_ids)})"
        )
