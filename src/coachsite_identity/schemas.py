"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded session token payload.

    Attributes
    ----------
    user_id
        The unique identifier of the user
    role
        The role the user held when the token was issued
    exp
        Token expiration timestamp
    """

    user_id: UUID
    role: str
    exp: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.exp.tzinfo) > self.exp
