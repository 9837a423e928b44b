"""Conversion of multipart file fields into media uploads."""

from fastapi import HTTPException, UploadFile, status

from coachsite.application.ports import MediaUpload

MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB


async def read_upload(file: UploadFile | None) -> MediaUpload | None:
    """Read an optional file field; empty or missing files yield ``None``."""
    if file is None:
        return None

    content = await file.read()
    if not content:
        return None

    if len(content) > MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="File too large (max 10MB)",
        )
    if file.content_type and not file.content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only image uploads are supported",
        )

    return MediaUpload(
        content=content,
        filename=file.filename or "upload",
        content_type=file.content_type,
    )
