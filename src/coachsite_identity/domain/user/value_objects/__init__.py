"""Value objects for the user domain."""

from coachsite_identity.domain.user.value_objects.email import Email
from coachsite_identity.domain.user.value_objects.otp_purpose import OtpPurpose
from coachsite_identity.domain.user.value_objects.permission import (
    ROLE_PERMISSIONS,
    Permission,
    role_has_permission,
)
from coachsite_identity.domain.user.value_objects.user_role import UserRole

__all__ = [
    "ROLE_PERMISSIONS",
    "Email",
    "OtpPurpose",
    "Permission",
    "UserRole",
    "role_has_permission",
]
