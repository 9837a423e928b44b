"""Media storage port for the application layer.

This abstracts the third-party image host, keeping HTTP clients and
the host's API contract out of the application layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from coachsite.domain.shared.exceptions import ErrorCode, UpstreamError
from coachsite.domain.shared.media_asset import MediaAsset


@dataclass(frozen=True)
class MediaUpload:
    """An uploaded file as received from the client."""

    content: bytes
    filename: str
    content_type: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.content


class MediaStorageError(UpstreamError):
    """Raised when the media host rejects or fails a request."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.MEDIA_STORAGE_FAILED,
            details=details,
        )


class MediaStorage(ABC):
    """Port for storing and removing hosted images."""

    @abstractmethod
    async def upload(self, upload: MediaUpload, folder: str) -> MediaAsset:
        """Store an image and return its public reference.

        Raises
        ------
        MediaStorageError
            If the host is unavailable or rejects the file
        """

    @abstractmethod
    async def delete(self, public_id: str) -> None:
        """Remove a hosted image.

        Raises
        ------
        MediaStorageError
            If the host is unavailable or rejects the request
        """
