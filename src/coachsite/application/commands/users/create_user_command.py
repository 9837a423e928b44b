from coachsite.application.ports import MediaUpload
from coachsite.application.services.media_asset_service import MediaAssetService
from coachsite_identity import (
    Email,
    EmailAlreadyExistsError,
    PasswordHashingService,
    User,
    UserRepository,
    UserRole,
)

AVATAR_FOLDER = "avatars"


class CreateUserCommand:
    """Command to create an already verified user (admin or seeding)."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        media_service: MediaAssetService | None = None,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._media = media_service

    async def execute(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
        mobile: str | None = None,
        domain_url: str | None = None,
        avatar: MediaUpload | None = None,
    ) -> User:
        email_obj = Email(email)
        existing = await self._user_repo.find_by_email(email_obj)
        if existing:
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = self._password_service.hash(password)
        avatar_asset = (
            await self._media.upload(avatar, AVATAR_FOLDER) if self._media else None
        )

        try:
            user = User.create(
                email_obj,
                name=name,
                role=role,
                mobile=mobile,
                domain_url=domain_url,
                password_hash=password_hash,
                is_verified=True,
                avatar=avatar_asset,
            )
            await self._user_repo.save(user)
        except Exception:
            if self._media:
                await self._media.discard(avatar_asset)
            raise

        return user
