from enum import Enum


class UserRole(str, Enum):
    """User roles: administrators manage coaches, coaches manage content."""

    USER = "user"
    ADMIN = "admin"
