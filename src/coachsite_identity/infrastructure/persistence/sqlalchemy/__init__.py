"""SQLAlchemy implementation for coachsite_identity persistence.

Provides:
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from coachsite_identity.infrastructure.persistence.sqlalchemy.models import (
    UserModel,
)
from coachsite_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "UserModel",
    "UserRepositorySQLAlchemy",
]
