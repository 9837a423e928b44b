from coachsite.application.services.authentication_service import (
    AuthenticationService,
)
from coachsite.application.services.media_asset_service import MediaAssetService

__all__ = [
    "AuthenticationService",
    "MediaAssetService",
]
