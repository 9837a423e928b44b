from coachsite.application.ports.media_storage import (
    MediaStorage,
    MediaStorageError,
    MediaUpload,
)

__all__ = [
    "MediaStorage",
    "MediaStorageError",
    "MediaUpload",
]
