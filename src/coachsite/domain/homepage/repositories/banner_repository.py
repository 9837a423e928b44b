"""Repository interface for banners."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from coachsite.domain.homepage.entities import Banner


class BannerRepository(ABC):
    """Repository interface for persisting and retrieving banners."""

    @abstractmethod
    async def find_by_id(self, banner_id: UUID) -> Optional[Banner]:
        """
        Find a banner by ID.

        Parameters
        ----------
        banner_id
            Banner ID to search for

        Returns
        -------
        Banner if found, None otherwise
        """

    @abstractmethod
    async def find_by_ids(self, banner_ids: list[UUID]) -> list[Banner]:
        """Load the given banners in the order of ``banner_ids``.

        Unknown IDs are skipped.
        """

    @abstractmethod
    async def find_all(
        self,
        user_id: UUID | None = None,
        domain_url: str | None = None,
    ) -> list[Banner]:
        """
        List banners, newest first.

        Parameters
        ----------
        user_id
            Only banners owned by this user
        domain_url
            Only banners published under this domain

        Returns
        -------
        Matching banners ordered by creation time, descending
        """

    @abstractmethod
    async def save(self, banner: Banner) -> None:
        """Save or update a banner."""

    @abstractmethod
    async def delete(self, banner_id: UUID) -> None:
        """Delete a banner by ID."""
