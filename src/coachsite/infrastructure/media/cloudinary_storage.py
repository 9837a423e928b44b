"""Cloudinary implementation of the MediaStorage port.

Talks to the Cloudinary upload API directly over HTTP. Requests are
signed with SHA-1 over the sorted request parameters followed by the
API secret.
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import TYPE_CHECKING

import httpx

from coachsite.application.ports import MediaStorage, MediaStorageError
from coachsite.domain.shared.media_asset import MediaAsset

if TYPE_CHECKING:
    from coachsite.application.ports import MediaUpload
    from coachsite_config.settings import Settings

logger = logging.getLogger(__name__)


class CloudinaryMediaStorage(MediaStorage):
    """Media storage backed by the Cloudinary REST API."""

    API_BASE_URL = "https://api.cloudinary.com/v1_1"
    DESTROY_OK_RESULTS = frozenset({"ok", "not found"})

    def __init__(  # NOQA: PLR0913
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        root_folder: str = "coachsite",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._cloud_name = cloud_name
        self._api_key = api_key
        self._api_secret = api_secret
        self._root_folder = root_folder.strip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> CloudinaryMediaStorage:
        api_secret = (
            settings.cloudinary_api_secret.get_secret_value()
            if settings.cloudinary_api_secret
            else ""
        )
        return cls(
            cloud_name=settings.cloudinary_cloud_name,
            api_key=settings.cloudinary_api_key,
            api_secret=api_secret,
            root_folder=settings.cloudinary_folder,
            timeout=settings.cloudinary_timeout,
        )

    @property
    def enabled(self) -> bool:
        return bool(self._cloud_name and self._api_key and self._api_secret)

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=f"{self.API_BASE_URL}/{self._cloud_name}",
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def sign(self, params: dict[str, str]) -> str:
        """Return the request signature for ``params``.

        Empty values are left out, as the host does when verifying.
        """
        to_sign = "&".join(
            f"{key}={value}" for key, value in sorted(params.items()) if value
        )
        return hashlib.sha1(  # NOQA: S324
            (to_sign + self._api_secret).encode("utf-8"),
        ).hexdigest()

    def _signed_form(self, params: dict[str, str]) -> dict[str, str]:
        params = {**params, "timestamp": str(int(time.time()))}
        return {
            **params,
            "api_key": self._api_key,
            "signature": self.sign(params),
        }

    async def upload(self, upload: MediaUpload, folder: str) -> MediaAsset:
        if not self.enabled:
            msg = "Media storage is not configured"
            raise MediaStorageError(msg)

        form = self._signed_form({"folder": f"{self._root_folder}/{folder}"})
        files = {
            "file": (
                upload.filename,
                upload.content,
                upload.content_type or "application/octet-stream",
            ),
        }

        body = await self._post("/image/upload", form, files=files)
        try:
            asset = MediaAsset(url=body["secure_url"], public_id=body["public_id"])
        except (KeyError, ValueError) as e:
            msg = "Media host returned an unexpected response"
            raise MediaStorageError(msg) from e

        logger.info("Uploaded media %s", asset.public_id)
        return asset

    async def delete(self, public_id: str) -> None:
        if not self.enabled:
            logger.warning("Media storage disabled, not deleting %s", public_id)
            return

        body = await self._post(
            "/image/destroy",
            self._signed_form({"public_id": public_id}),
        )
        result = body.get("result")
        if result not in self.DESTROY_OK_RESULTS:
            msg = f"Media host refused to delete {public_id}: {result}"
            raise MediaStorageError(msg, details={"public_id": public_id})

        logger.info("Deleted media %s (%s)", public_id, result)

    async def _post(
        self,
        path: str,
        data: dict[str, str],
        files: dict | None = None,
    ) -> dict:
        try:
            client = await self._get_client()
            response = await client.post(path, data=data, files=files)
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as e:
            logger.warning("Media host timed out after %.1fs", self._timeout)
            msg = "Media host timed out"
            raise MediaStorageError(msg) from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Media host returned error %d: %s",
                e.response.status_code,
                e.response.text[:200] if e.response.text else "no body",
            )
            msg = "Media host rejected the request"
            raise MediaStorageError(
                msg,
                details={"status_code": e.response.status_code},
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Media host request failed (%s): %s", type(e).__name__, e)
            msg = "Media host request failed"
            raise MediaStorageError(msg) from e
