"""Homepage content exceptions.

These exceptions inherit from the shared DomainException base class and
are rendered by the centralized API exception handlers.
"""

from uuid import UUID

from coachsite.domain.shared.exceptions import (
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    ValidationError,
)


class BannerNotFoundError(EntityNotFoundError):
    """Raised when a banner cannot be found."""

    def __init__(self, banner_id: UUID | str) -> None:
        super().__init__(
            message="Banner not found",
            code=ErrorCode.BANNER_NOT_FOUND,
            details={"banner_id": str(banner_id)},
        )


class TestimonialNotFoundError(EntityNotFoundError):
    """Raised when a testimonial cannot be found."""

    def __init__(self, testimonial_id: UUID | str) -> None:
        super().__init__(
            message="Testimonial not found",
            code=ErrorCode.TESTIMONIAL_NOT_FOUND,
            details={"testimonial_id": str(testimonial_id)},
        )


class HomePageNotFoundError(EntityNotFoundError):
    """Raised when a user has no homepage yet."""

    def __init__(self, user_id: UUID | str) -> None:
        super().__init__(
            message="Home page not found",
            code=ErrorCode.HOME_PAGE_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class ContentOwnerNotFoundError(EntityNotFoundError):
    """Raised when content references a user that does not exist."""

    def __init__(self, user_id: UUID | str) -> None:
        super().__init__(
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": str(user_id)},
        )


class InvalidRatingError(ValidationError):
    """Raised when a testimonial rating is outside 1..5."""

    def __init__(self, rating: object) -> None:
        super().__init__(
            message="Rating must be an integer between 1 and 5",
            code=ErrorCode.INVALID_RATING,
            details={"rating": rating},
        )


class MissingMediaError(ValidationError):
    """Raised when a required image was not supplied."""

    def __init__(self, field: str) -> None:
        super().__init__(
            message=f"{field} is required",
            code=ErrorCode.MISSING_MEDIA,
            details={"field": field},
        )


class ContentAccessDeniedError(ForbiddenError):
    """Raised when a user edits content owned by someone else."""

    def __init__(self, resource: str, resource_id: UUID | str) -> None:
        super().__init__(
            message=f"You cannot modify this {resource}",
            details={"resource": resource, "resource_id": str(resource_id)},
        )
