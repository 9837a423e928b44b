"""Tests for the Cloudinary media storage adapter over a mocked transport."""

import hashlib
from urllib.parse import parse_qs

import httpx
import pytest

from coachsite.application.ports import MediaStorageError
from coachsite.infrastructure.media import CloudinaryMediaStorage
from coachsite_config.settings import Settings
from tests.shared.fixtures.fakes import image_upload


def make_storage(handler) -> CloudinaryMediaStorage:
    return CloudinaryMediaStorage(
        cloud_name="demo",
        api_key="key",
        api_secret="secret",
        transport=httpx.MockTransport(handler),
    )


class TestSigning:
    def test_signature_sorts_params_and_appends_secret(self):
        storage = make_storage(lambda request: httpx.Response(200))

        signature = storage.sign({"timestamp": "100", "folder": "coachsite/banners"})

        expected = hashlib.sha1(  # NOQA: S324
            b"folder=coachsite/banners&timestamp=100secret",
        ).hexdigest()
        assert signature == expected

    def test_empty_values_are_not_signed(self):
        storage = make_storage(lambda request: httpx.Response(200))

        assert storage.sign({"timestamp": "100", "folder": ""}) == storage.sign(
            {"timestamp": "100"},
        )

    def test_enabled_requires_credentials(self):
        settings = Settings(
            _env_file=None,
            jwt_secret_key="test-secret",
            postgres_password="unused",
            cloudinary_cloud_name="demo",
        )

        assert not CloudinaryMediaStorage.from_settings(settings).enabled


class TestUpload:
    @pytest.mark.asyncio
    async def test_upload_returns_asset(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["body"] = request.content
            return httpx.Response(
                200,
                json={
                    "secure_url": "https://res.cloudinary.com/demo/banner.png",
                    "public_id": "coachsite/banners/abc",
                },
            )

        storage = make_storage(handler)
        asset = await storage.upload(image_upload("banner.png"), "banners")
        await storage.close()

        assert asset.url == "https://res.cloudinary.com/demo/banner.png"
        assert asset.public_id == "coachsite/banners/abc"
        assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/image/upload"
        assert b"coachsite/banners" in seen["body"]
        assert b"banner.png" in seen["body"]

    @pytest.mark.asyncio
    async def test_unexpected_response_body(self):
        storage = make_storage(lambda request: httpx.Response(200, json={}))

        with pytest.raises(MediaStorageError):
            await storage.upload(image_upload(), "banners")

    @pytest.mark.asyncio
    async def test_http_error(self):
        storage = make_storage(lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(MediaStorageError) as exc_info:
            await storage.upload(image_upload(), "banners")

        assert exc_info.value.details == {"status_code": 500}

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        storage = make_storage(handler)

        with pytest.raises(MediaStorageError):
            await storage.upload(image_upload(), "banners")

    @pytest.mark.asyncio
    async def test_disabled_storage_refuses_upload(self):
        storage = CloudinaryMediaStorage(cloud_name="", api_key="", api_secret="")

        with pytest.raises(MediaStorageError):
            await storage.upload(image_upload(), "banners")


class TestDelete:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("result", ["ok", "not found"])
    async def test_accepted_results(self, result):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"result": result})

        storage = make_storage(handler)
        await storage.delete("coachsite/banners/abc")

        assert seen["form"]["public_id"] == ["coachsite/banners/abc"]
        assert seen["form"]["api_key"] == ["key"]
        assert "signature" in seen["form"]

    @pytest.mark.asyncio
    async def test_refused_delete(self):
        storage = make_storage(
            lambda request: httpx.Response(200, json={"result": "error"}),
        )

        with pytest.raises(MediaStorageError):
            await storage.delete("coachsite/banners/abc")

    @pytest.mark.asyncio
    async def test_disabled_storage_skips_delete(self):
        storage = CloudinaryMediaStorage(cloud_name="", api_key="", api_secret="")

        await storage.delete("coachsite/banners/abc")
