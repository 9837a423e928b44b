"""User domain: identity, credentials and roles.

This domain handles:
- User aggregate (identity, profile, password hash, pending OTP)
- Roles and the permissions they grant
- Email normalization
"""

from coachsite_identity.domain.user.aggregates import User
from coachsite_identity.domain.user.exceptions import (
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from coachsite_identity.domain.user.repositories import UserRepository
from coachsite_identity.domain.user.value_objects import (
    Email,
    OtpPurpose,
    Permission,
    UserRole,
)

__all__ = [
    "CannotDeleteSelfError",
    "CannotDemoteSelfError",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "OtpPurpose",
    "Permission",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
