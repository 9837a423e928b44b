from uuid import UUID

from coachsite.application.ports import MediaUpload
from coachsite.application.services.media_asset_service import MediaAssetService
from coachsite.domain.shared.exceptions import ForbiddenError
from coachsite_identity import (
    CannotDemoteSelfError,
    Permission,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)

AVATAR_FOLDER = "avatars"


class UpdateUserCommand:
    """Command to merge profile changes into a user.

    Used both for the caller's own profile and by administrators. Only
    callers allowed to manage users may change a role.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        media_service: MediaAssetService,
    ):
        self._user_repo = user_repository
        self._media = media_service

    async def execute(  # NOQA: PLR0913
        self,
        user_id: UUID,
        requesting_user: User,
        name: str | None = None,
        mobile: str | None = None,
        domain_url: str | None = None,
        role: UserRole | None = None,
        avatar: MediaUpload | None = None,
    ) -> User:
        if role is not None:
            if not requesting_user.can(Permission.MANAGE_USERS):
                msg = "Only administrators can change roles"
                raise ForbiddenError(msg)
            if user_id == requesting_user.id and role != UserRole.ADMIN:
                raise CannotDemoteSelfError

        user = await self._user_repo.find_by_id(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))

        new_avatar = await self._media.upload(avatar, AVATAR_FOLDER)
        previous_avatar = None

        try:
            user.update_profile(name=name, mobile=mobile, domain_url=domain_url)
            if role is not None:
                user.change_role(role)
            if new_avatar:
                previous_avatar = user.replace_avatar(new_avatar)
            await self._user_repo.save(user)
        except Exception:
            await self._media.discard(new_avatar)
            raise

        await self._media.discard(previous_avatar)
        return user
