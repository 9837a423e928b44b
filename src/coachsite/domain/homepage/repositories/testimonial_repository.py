"""Repository interface for testimonials."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from coachsite.domain.homepage.entities import Testimonial


class TestimonialRepository(ABC):
    """Repository interface for persisting and retrieving testimonials."""

    @abstractmethod
    async def find_by_id(self, testimonial_id: UUID) -> Optional[Testimonial]:
        """Find a testimonial by ID."""

    @abstractmethod
    async def find_by_ids(self, testimonial_ids: list[UUID]) -> list[Testimonial]:
        """Load the given testimonials in the order of ``testimonial_ids``.

        Unknown IDs are skipped.
        """

    @abstractmethod
    async def find_all(
        self,
        user_id: UUID | None = None,
        domain_url: str | None = None,
    ) -> list[Testimonial]:
        """List testimonials, newest first, optionally filtered."""

    @abstractmethod
    async def save(self, testimonial: Testimonial) -> None:
        """Save or update a testimonial."""

    @abstractmethod
    async def delete(self, testimonial_id: UUID) -> None:
        """Delete a testimonial by ID."""
