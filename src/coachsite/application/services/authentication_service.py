"""Authentication service for signup, login and password recovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from coachsite_identity import (
    AccountNotVerifiedError,
    AlreadyVerifiedError,
    Email,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    JWTService,
    OtpPurpose,
    OtpService,
    PasswordHashingService,
    PasswordNotSetError,
    User,
    UserNotFoundError,
    UserRole,
)

if TYPE_CHECKING:
    from coachsite.application.ports import MediaUpload
    from coachsite.application.services.media_asset_service import (
        MediaAssetService,
    )
    from coachsite_identity import UserRepository

logger = logging.getLogger(__name__)

AVATAR_FOLDER = "avatars"


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates the identity building blocks (password hashing, one-time
    codes, session tokens) to provide:
    - Signup with email verification
    - Login with password or with an emailed code
    - Password reset with an emailed code
    """

    def __init__(  # NOQA: PLR0913
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
        otp_service: OtpService,
        media_service: MediaAssetService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service
        self._otp_service = otp_service
        self._media = media_service

    def _create_token(self, user: User) -> str:
        return self._jwt_service.create_access_token(
            user_id=user.id,
            role=user.role.value,
        )

    async def _get_user_by_email(self, email: str) -> User:
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def signup(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        password: str,
        mobile: str | None = None,
        domain_url: str | None = None,
        avatar: MediaUpload | None = None,
    ) -> User:
        """Create an unverified account and email it a verification code.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is taken
        WeakPasswordError
            If the password is too short
        MediaStorageError
            If the avatar upload fails
        EmailDeliveryError
            If the verification email cannot be sent
        """
        email_obj = Email(email)
        if await self._user_repo.exists_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)

        password_hash = self._password_service.hash(password)
        avatar_asset = await self._media.upload(avatar, AVATAR_FOLDER)

        try:
            user = User.create(
                email_obj,
                name=name,
                role=UserRole.USER,
                mobile=mobile,
                domain_url=domain_url,
                password_hash=password_hash,
                avatar=avatar_asset,
            )
            await self._user_repo.save(user)
            await self._otp_service.issue(user, OtpPurpose.SIGNUP_VERIFICATION)
        except Exception:
            await self._media.discard(avatar_asset)
            raise

        logger.info("User signed up: %s", user.email)
        return user

    async def verify_signup_otp(self, email: str, otp: str) -> tuple[User, str]:
        user = await self._get_user_by_email(email)
        if user.is_verified:
            raise AlreadyVerifiedError

        await self._otp_service.verify(user, otp, OtpPurpose.SIGNUP_VERIFICATION)

        logger.info("User verified: %s", user.email)
        return user, self._create_token(user)

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Password login.

        Unverified accounts are always rejected, with
        ``InvalidCredentialsError`` when the password is wrong and
        ``AccountNotVerifiedError`` when it is right.
        """
        user = await self._get_user_by_email(email)

        if not user.has_password:
            raise PasswordNotSetError

        if not self._password_service.verify(password, user.password_hash or ""):
            logger.info("Failed login for %s", user.email)
            raise InvalidCredentialsError

        if not user.is_verified:
            raise AccountNotVerifiedError

        logger.info("User logged in: %s", user.email)
        return user, self._create_token(user)

    async def send_login_otp(self, email: str) -> None:
        user = await self._get_user_by_email(email)
        await self._otp_service.issue(user, OtpPurpose.LOGIN)

    async def verify_login_otp(self, email: str, otp: str) -> tuple[User, str]:
        user = await self._get_user_by_email(email)
        await self._otp_service.verify(user, otp, OtpPurpose.LOGIN)

        logger.info("User logged in with OTP: %s", user.email)
        return user, self._create_token(user)

    async def request_password_reset(self, email: str) -> None:
        user = await self._get_user_by_email(email)
        await self._otp_service.issue(user, OtpPurpose.PASSWORD_RESET)

    async def reset_password(self, email: str, otp: str, new_password: str) -> None:
        """Set a new password after consuming a password-reset code.

        The new password is validated before the code is consumed, so a
        rejected password leaves the code usable.
        """
        user = await self._get_user_by_email(email)
        password_hash = self._password_service.hash(new_password)

        await self._otp_service.verify(user, otp, OtpPurpose.PASSWORD_RESET)

        user.change_password(password_hash)
        await self._user_repo.save(user)

        logger.info("Password reset for user: %s", user.email)
