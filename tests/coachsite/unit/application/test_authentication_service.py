"""Unit tests for AuthenticationService."""

from unittest.mock import AsyncMock

import pytest

from coachsite.application.services import AuthenticationService, MediaAssetService
from coachsite.domain.shared.time import utc_now
from coachsite_identity import (
    AccountNotVerifiedError,
    AlreadyVerifiedError,
    EmailAlreadyExistsError,
    EmailDeliveryError,
    InvalidCredentialsError,
    JWTService,
    OtpService,
    OtpPurpose,
    PasswordHashingService,
    PasswordNotSetError,
    User,
    UserNotFoundError,
    UserRole,
    WeakPasswordError,
)
from tests.shared.fixtures.fakes import (
    FakeMediaStorage,
    RecordingEmailService,
    image_upload,
)

TEST_EMAIL = "coach@example.com"
TEST_PASSWORD = "secret123"


class AuthServiceTestBase:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.user_repo.exists_by_email.return_value = False
        self.email_service = RecordingEmailService()
        self.storage = FakeMediaStorage()
        self.password_service = PasswordHashingService(rounds=4)
        self.jwt_service = JWTService(secret_key="test-secret")

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
            otp_service=OtpService(
                self.user_repo,
                self.email_service,
                hash_rounds=4,
            ),
            media_service=MediaAssetService(self.storage),
        )

    def _existing_user(self, verified: bool = True, password: str | None = TEST_PASSWORD):
        user = User.create(
            TEST_EMAIL,
            name="Coach",
            password_hash=self.password_service.hash(password) if password else None,
            is_verified=verified,
        )
        self.user_repo.find_by_email.return_value = user
        return user


class TestSignup(AuthServiceTestBase):
    @pytest.mark.asyncio
    async def test_signup_creates_unverified_user_and_sends_code(self):
        user = await self.service.signup(
            name="Coach",
            email=TEST_EMAIL,
            password=TEST_PASSWORD,
            avatar=image_upload(),
        )

        assert user.role == UserRole.USER
        assert not user.is_verified
        assert user.has_pending_otp
        assert user.avatar is not None
        assert self.email_service.outbox[-1].purpose == "signup verification"
        assert user.avatar.public_id in self.storage.stored

    @pytest.mark.asyncio
    async def test_signup_stores_hashed_password_and_live_code(self):
        user = await self.service.signup(
            name="Coach",
            email=TEST_EMAIL,
            password=TEST_PASSWORD,
        )

        assert user.password_hash is not None
        assert user.password_hash != TEST_PASSWORD
        assert self.password_service.verify(TEST_PASSWORD, user.password_hash)

        code = self.email_service.outbox[-1].otp
        assert user.otp_hash != code
        assert user.otp_expires_at is not None
        assert user.otp_expires_at > utc_now()
        assert user.otp_purpose == OtpPurpose.SIGNUP_VERIFICATION

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected_before_upload(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.signup(
                name="Coach",
                email=TEST_EMAIL,
                password=TEST_PASSWORD,
                avatar=image_upload(),
            )

        assert self.storage.stored == {}

    @pytest.mark.asyncio
    async def test_weak_password_rejected_before_upload(self):
        with pytest.raises(WeakPasswordError):
            await self.service.signup(
                name="Coach",
                email=TEST_EMAIL,
                password="123",
                avatar=image_upload(),
            )

        assert self.storage.stored == {}

    @pytest.mark.asyncio
    async def test_email_failure_removes_uploaded_avatar(self):
        self.email_service.fail = True

        with pytest.raises(EmailDeliveryError):
            await self.service.signup(
                name="Coach",
                email=TEST_EMAIL,
                password=TEST_PASSWORD,
                avatar=image_upload(),
            )

        assert self.storage.stored == {}
        assert len(self.storage.deleted) == 1


class TestVerifySignup(AuthServiceTestBase):
    @pytest.mark.asyncio
    async def test_verifies_and_returns_token(self):
        await self.service.signup(name="Coach", email=TEST_EMAIL, password=TEST_PASSWORD)
        user = self.user_repo.save.call_args[0][0]
        self.user_repo.find_by_email.return_value = user

        verified, token = await self.service.verify_signup_otp(
            TEST_EMAIL,
            self.email_service.last_code_for(TEST_EMAIL),
        )

        assert verified.is_verified
        assert self.jwt_service.verify_token(token).user_id == user.id

    @pytest.mark.asyncio
    async def test_already_verified(self):
        self._existing_user(verified=True)

        with pytest.raises(AlreadyVerifiedError):
            await self.service.verify_signup_otp(TEST_EMAIL, "123456")

    @pytest.mark.asyncio
    async def test_unknown_user(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.verify_signup_otp(TEST_EMAIL, "123456")


class TestLogin(AuthServiceTestBase):
    @pytest.mark.asyncio
    async def test_success_returns_role_in_token(self):
        user = self._existing_user()

        _, token = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        payload = self.jwt_service.verify_token(token)
        assert payload.user_id == user.id
        assert payload.role == "user"

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_wrong_password(self):
        self._existing_user()

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong-password")

    @pytest.mark.asyncio
    async def test_no_password_set(self):
        self._existing_user(password=None)

        with pytest.raises(PasswordNotSetError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_unverified_rejected_with_correct_password(self):
        self._existing_user(verified=False)

        with pytest.raises(AccountNotVerifiedError):
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_unverified_rejected_with_wrong_password(self):
        self._existing_user(verified=False)

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong-password")


class TestOtpLogin(AuthServiceTestBase):
    @pytest.mark.asyncio
    async def test_code_login_verifies_account(self):
        user = self._existing_user(verified=False, password=None)

        await self.service.send_login_otp(TEST_EMAIL)
        _, token = await self.service.verify_login_otp(
            TEST_EMAIL,
            self.email_service.last_code_for(TEST_EMAIL),
        )

        assert user.is_verified
        assert self.jwt_service.verify_token(token).user_id == user.id


class TestPasswordReset(AuthServiceTestBase):
    @pytest.mark.asyncio
    async def test_reset_sets_new_password(self):
        user = self._existing_user()

        await self.service.request_password_reset(TEST_EMAIL)
        await self.service.reset_password(
            TEST_EMAIL,
            self.email_service.last_code_for(TEST_EMAIL),
            "brand-new-pass",
        )

        assert self.password_service.verify("brand-new-pass", user.password_hash)
        assert not user.has_pending_otp

    @pytest.mark.asyncio
    async def test_weak_new_password_keeps_code(self):
        user = self._existing_user()
        await self.service.request_password_reset(TEST_EMAIL)

        with pytest.raises(WeakPasswordError):
            await self.service.reset_password(
                TEST_EMAIL,
                self.email_service.last_code_for(TEST_EMAIL),
                "123",
            )

        assert user.has_pending_otp

    @pytest.mark.asyncio
    async def test_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.service.request_password_reset(TEST_EMAIL)
