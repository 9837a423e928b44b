"""Upload and clean-up helpers around the media storage port.

Writes that involve hosted images follow one order: upload the new
images, write the record, then delete images the record no longer
references. If the write fails, the fresh uploads are deleted instead
(compensation). Deletes are best effort: a failure is logged and never
aborts the request.
"""

import logging
from collections.abc import Iterable

from coachsite.application.ports import MediaStorage, MediaStorageError, MediaUpload
from coachsite.domain.shared.media_asset import MediaAsset

logger = logging.getLogger(__name__)


class MediaAssetService:
    """Application service for hosted image lifecycles."""

    def __init__(self, storage: MediaStorage):
        self._storage = storage

    async def upload(
        self,
        upload: MediaUpload | None,
        folder: str,
    ) -> MediaAsset | None:
        """Upload a file if one was supplied.

        Empty uploads (a form field sent without a file) count as absent.
        """
        if upload is None or upload.is_empty:
            return None
        asset = await self._storage.upload(upload, folder)
        logger.debug("Uploaded %s to %s as %s", upload.filename, folder, asset.public_id)
        return asset

    async def upload_many(
        self,
        uploads: Iterable[tuple[MediaUpload | None, str]],
    ) -> list[MediaAsset | None]:
        """Upload several files; on failure, delete the ones already stored."""
        assets: list[MediaAsset | None] = []
        try:
            for upload, folder in uploads:
                assets.append(await self.upload(upload, folder))
        except MediaStorageError:
            await self.discard_all(assets)
            raise
        return assets

    async def discard(self, asset: MediaAsset | None) -> None:
        """Delete a hosted image, logging instead of raising on failure."""
        if asset is None:
            return
        try:
            await self._storage.delete(asset.public_id)
        except MediaStorageError as e:
            logger.warning("Failed to delete media %s: %s", asset.public_id, e)

    async def discard_all(self, assets: Iterable[MediaAsset | None]) -> None:
        for asset in assets:
            await self.discard(asset)
