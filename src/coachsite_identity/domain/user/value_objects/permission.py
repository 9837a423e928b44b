"""Permissions granted to each role.

Routes declare the permission they need; a single authorization
dependency checks it against the caller's role.
"""

from enum import Enum

from coachsite_identity.domain.user.value_objects.user_role import UserRole


class Permission(str, Enum):
    MANAGE_OWN_CONTENT = "content:manage_own"
    MANAGE_ANY_CONTENT = "content:manage_any"
    MANAGE_USERS = "users:manage"


ROLE_PERMISSIONS: dict[UserRole, frozenset[Permission]] = {
    UserRole.USER: frozenset({Permission.MANAGE_OWN_CONTENT}),
    UserRole.ADMIN: frozenset(Permission),
}


def role_has_permission(role: UserRole, permission: Permission) -> bool:
    return permission in ROLE_PERMISSIONS.get(role, frozenset())
