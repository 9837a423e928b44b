"""Common schemas shared across API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from coachsite.domain.shared.media_asset import MediaAsset


class MessageResponse(BaseModel):
    """Response carrying only a human-readable message."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    message: str = Field(..., description="Error message")
    error: str | None = Field(
        None,
        description="Error code for programmatic handling",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"message": "Banner not found", "error": "BANNER_NOT_FOUND"},
        },
    )


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="API version")


class MediaAssetResponse(BaseModel):
    """A hosted image reference."""

    url: str
    public_id: str


def media_to_response(asset: MediaAsset | None) -> MediaAssetResponse | None:
    if asset is None:
        return None
    return MediaAssetResponse(url=asset.url, public_id=asset.public_id)
