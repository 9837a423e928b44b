"""Identity services - session tokens and password hashing."""

from coachsite_identity.services.jwt_service import JWTService
from coachsite_identity.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
