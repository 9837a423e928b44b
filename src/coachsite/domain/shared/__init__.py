"""Shared domain kernel: errors, clock and value objects."""

from coachsite.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UpstreamError,
    ValidationError,
)
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ForbiddenError",
    "MediaAsset",
    "UpstreamError",
    "ValidationError",
    "utc_now",
]
