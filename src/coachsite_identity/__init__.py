"""Coachsite Identity - users, credentials and sessions.

This package handles all identity-related concerns:
- User management (roles, profile, verification flag)
- One-time codes sent by email (signup, login, password reset)
- Session tokens and password hashing
- Role permissions used by the API authorization dependency
"""

from coachsite_identity.application.services import OtpService
from coachsite_identity.domain.user import (
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    OtpPurpose,
    Permission,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from coachsite_identity.exceptions import (
    AccountNotVerifiedError,
    AlreadyVerifiedError,
    AuthError,
    EmailDeliveryError,
    InvalidCredentialsError,
    InvalidTokenError,
    OtpError,
    OtpExpiredError,
    OtpMismatchError,
    OtpNotFoundError,
    PasswordNotSetError,
    WeakPasswordError,
)
from coachsite_identity.schemas import TokenPayload
from coachsite_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
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
    # Exceptions
    "AccountNotVerifiedError",
    "AlreadyVerifiedError",
    "AuthError",
    "EmailDeliveryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "OtpError",
    "OtpExpiredError",
    "OtpMismatchError",
    "OtpNotFoundError",
    "PasswordNotSetError",
    "WeakPasswordError",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application Services
    "OtpService",
]
