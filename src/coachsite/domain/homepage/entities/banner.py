"""Banner entity shown in the hero carousel of a coach's homepage."""

from datetime import datetime
from uuid import UUID, uuid4

from coachsite.domain.shared.exceptions import ValidationError
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.domain.shared.time import utc_now


class Banner:
    """
    A headline with a main image and an optional side image.

    Each banner belongs to one user and is referenced from that user's
    HomePage aggregate.
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_id: UUID,
        home_page_id: UUID,
        title: str,
        image: MediaAsset,
        description: str | None = None,
        side_image: MediaAsset | None = None,
        domain_url: str | None = None,
        is_active: bool = True,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._user_id = user_id
        self._home_page_id = home_page_id
        self._title = (title or "").strip()
        self._description = description
        self._image = image
        self._side_image = side_image
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
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def image(self) -> MediaAsset:
        return self._image

    @property
    def side_image(self) -> MediaAsset | None:
        return self._side_image

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
        """All hosted images owned by this banner."""
        return [asset for asset in (self._image, self._side_image) if asset]

    def _validate(self) -> None:
        if not self._title:
            msg = "Title is required"
            raise ValidationError(msg)

    def update_details(
        self,
        title: str | None = None,
        description: str | None = None,
        domain_url: str | None = None,
        is_active: bool | None = None,
    ) -> None:
        """Merge the supplied fields; ``None`` leaves a field untouched."""
        if title is not None:
            if not title.strip():
                msg = "Title is required"
                raise ValidationError(msg)
            self._title = title.strip()
        if description is not None:
            self._description = description
        if domain_url is not None:
            self._domain_url = domain_url
        if is_active is not None:
            self._is_active = is_active
        self._updated_at = utc_now()

    def replace_image(self, image: MediaAsset) -> MediaAsset:
        """Swap the main image and return the one it replaced."""
        previous = self._image
        self._image = image
        self._updated_at = utc_now()
        return previous

    def replace_side_image(self, side_image: MediaAsset) -> MediaAsset | None:
        """Swap the side image and return the one it replaced, if any."""
        previous = self._side_image
        self._side_image = side_image
        self._updated_at = utc_now()
        return previous

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        user_id: UUID,
        home_page_id: UUID,
        title: str,
        image: MediaAsset,
        description: str | None = None,
        side_image: MediaAsset | None = None,
        domain_url: str | None = None,
        is_active: bool = True,
    ) -> "Banner":
        return cls(
            user_id=user_id,
            home_page_id=home_page_id,
            title=title,
            image=image,
            description=description,
            side_image=side_image,
            domain_url=domain_url,
            is_active=is_active,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        home_page_id: UUID,
        title: str,
        image: MediaAsset,
        description: str | None,
        side_image: MediaAsset | None,
        domain_url: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Banner":
        return cls(
            id=id,
            user_id=user_id,
            home_page_id=home_page_id,
            title=title,
            image=image,
            description=description,
            side_image=side_image,
            domain_url=domain_url,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Banner):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Banner(id={self._id}, title={self._title!r})"
