"""Repository interface for homepage aggregates."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from coachsite.domain.homepage.aggregates import HomePage


class HomePageRepository(ABC):
    """Repository interface for persisting and retrieving homepages."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> Optional[HomePage]:
        """Find the homepage owned by a user."""

    @abstractmethod
    async def save(self, home_page: HomePage) -> None:
        """Save or update a homepage."""

    @abstractmethod
    async def delete(self, home_page_id: UUID) -> None:
        """Delete a homepage by ID."""
