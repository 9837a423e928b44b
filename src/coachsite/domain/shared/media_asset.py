"""Reference to an image stored on the media host."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaAsset:
    """Value object pairing the public URL with the host's asset id.

    The ``public_id`` is what the media host needs to delete the asset
    later; the ``url`` is what clients render.
    """

    url: str
    public_id: str

    def __post_init__(self) -> None:
        if not self.url:
            msg = "Media URL cannot be empty"
            raise ValueError(msg)
        if not self.public_id:
            msg = "Media public id cannot be empty"
            raise ValueError(msg)

    @classmethod
    def from_parts(cls, url: str | None, public_id: str | None) -> "MediaAsset | None":
        """Rebuild an optional asset from its two persisted columns."""
        if not url or not public_id:
            return None
        return cls(url=url, public_id=public_id)
