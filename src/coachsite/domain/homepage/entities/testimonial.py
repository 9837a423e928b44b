"""Testimonial entity: a student's review of a coaching institute."""

from datetime import datetime
from uuid import UUID, uuid4

from coachsite.domain.homepage.exceptions import InvalidRatingError
from coachsite.domain.shared.exceptions import ValidationError
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.domain.shared.time import utc_now

MIN_RATING = 1
MAX_RATING = 5


class Testimonial:
    """A named review with a 1-5 star rating and an optional photo."""

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        home_page_id: UUID,
        name: str,
        review: str,
        rating: int,
        role: str | None = None,
        image: MediaAsset | None = None,
        domain_url: str | None = None,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._home_page_id = home_page_id
        self._name = (name or "").strip()
        self._review = (review or "").strip()
        self._rating = rating
        self._role = role
        self._image = image
        self._domain_url = domain_url
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

        self._validate()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def home_page_id(self) -> UUID:
        return self._home_page_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def review(self) -> str:
        return self._review

    @property
    def rating(self) -> int:
        return self._rating

    @property
    def role(self) -> str | None:
        return self._role

    @property
    def image(self) -> MediaAsset | None:
        return self._image

    @property
    def domain_url(self) -> str | None:
        return self._domain_url

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def media(self) -> list[MediaAsset]:
        return [self._image] if self._image else []

    @staticmethod
    def _check_rating(rating: object) -> None:
        if (
            isinstance(rating, bool)
            or not isinstance(rating, int)
            or not MIN_RATING <= rating <= MAX_RATING
        ):
            raise InvalidRatingError(rating)

    def _validate(self) -> None:
        if not self._name:
            msg = "Name is required"
            raise ValidationError(msg)
        if not self._review:
            msg = "Review is required"
            raise ValidationError(msg)
        self._check_rating(self._rating)

    def update_details(  # NOQA: PLR0913
        self,
        name: str | None = None,
        role: str | None = None,
        review: str | None = None,
        rating: int | None = None,
        domain_url: str | None = None,
        is_active: bool | None = None,
    ) -> None:
        """Merge the supplied fields; ``None`` leaves a field untouched."""
        if name is not None:
            if not name.strip():
                msg = "Name is required"
                raise ValidationError(msg)
            self._name = name.strip()
        if review is not None:
            if not review.strip():
                msg = "Review is required"
                raise ValidationError(msg)
            self._review = review.strip()
        if rating is not None:
            self._check_rating(rating)
            self._rating = rating
        if role is not None:
            self._role = role
        if domain_url is not None:
            self._domain_url = domain_url
        if is_active is not None:
            self._is_active = is_active
        self._updated_at = utc_now()

    def replace_image(self, image: MediaAsset) -> MediaAsset | None:
        """Swap the photo and return the one it replaced, if any."""
        previous = self._image
        self._image = image
        self._updated_at = utc_now()
        return previous

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        home_page_id: UUID,
        name: str,
        review: str,
        rating: int,
        role: str | None = None,
        image: MediaAsset | None = None,
        domain_url: str | None = None,
        is_active: bool = True,
    ) -> "Testimonial":
        return cls(
            user_id=user_id,
            home_page_id=home_page_id,
            name=name,
            review=review,
            rating=rating,
            role=role,
            image=image,
            domain_url=domain_url,
            is_active=is_active,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        home_page_id: UUID,
        name: str,
        review: str,
        rating: int,
        role: str | None,
        image: MediaAsset | None,
        domain_url: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Testimonial":
        return cls(
            id=id,
            user_id=user_id,
            home_page_id=home_page_id,
            name=name,
            review=review,
            rating=rating,
            role=role,
            image=image,
            domain_url=domain_url,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Testimonial):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Testimonial(id={self._id}, name={self._name!r}, rating={self._rating})"
