"""In-memory stand-ins for the media host and the mail relay."""

from dataclasses import dataclass, field
from itertools import count

from coachsite.application.ports import MediaStorage, MediaStorageError, MediaUpload
from coachsite.domain.shared.media_asset import MediaAsset
from coachsite_identity import EmailDeliveryError


class FakeMediaStorage(MediaStorage):
    """Media storage keeping uploads in a dict.

    Set ``fail_uploads_after`` to make the n-th and later uploads fail, and
    ``fail_deletes`` to make every delete fail.
    """

    def __init__(self) -> None:
        self.stored: dict[str, MediaUpload] = {}
        self.deleted: list[str] = []
        self.fail_uploads_after: int | None = None
        self.fail_deletes = False
        self._ids = count(1)
        self._upload_count = 0

    async def upload(self, upload: MediaUpload, folder: str) -> MediaAsset:
        self._upload_count += 1
        if (
            self.fail_uploads_after is not None
            and self._upload_count > self.fail_uploads_after
        ):
            msg = "Upload failed"
            raise MediaStorageError(msg)
        public_id = f"coachsite/{folder}/{next(self._ids)}"
        self.stored[public_id] = upload
        return MediaAsset(url=f"https://cdn.test/{public_id}.png", public_id=public_id)

    async def delete(self, public_id: str) -> None:
        if self.fail_deletes:
            msg = "Delete failed"
            raise MediaStorageError(msg)
        self.stored.pop(public_id, None)
        self.deleted.append(public_id)


@dataclass
class SentOtp:
    to_email: str
    name: str
    otp: str
    purpose: str
    expiry_minutes: int


@dataclass
class RecordingEmailService:
    """Email service double that records one-time code emails."""

    outbox: list[SentOtp] = field(default_factory=list)
    fail: bool = False

    def send_otp_email(
        self,
        to_email: str,
        name: str,
        otp: str,
        purpose: str,
        expiry_minutes: int,
    ) -> None:
        if self.fail:
            raise EmailDeliveryError(to_email)
        self.outbox.append(SentOtp(to_email, name, otp, purpose, expiry_minutes))

    def last_code_for(self, email: str) -> str:
        for sent in reversed(self.outbox):
            if sent.to_email == email:
                return sent.otp
        msg = f"No code sent to {email}"
        raise AssertionError(msg)


def image_upload(name: str = "photo.png") -> MediaUpload:
    return MediaUpload(content=b"\x89PNG fake", filename=name, content_type="image/png")
