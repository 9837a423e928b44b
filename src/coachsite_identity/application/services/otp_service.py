"""One-time code issuance and verification.

A code is a short decimal string bound to one user and one purpose. Only
its bcrypt hash, expiry and purpose are stored on the user record; the
plaintext goes out by email, sent from a worker thread.

Issuing a new code replaces any pending one, so only the latest code is
ever valid. There is no rate limit on issuance or on verify attempts.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
import string
from datetime import timedelta
from typing import TYPE_CHECKING

import bcrypt

from coachsite.domain.shared.time import utc_now
from coachsite_identity.domain.user import OtpPurpose, User
from coachsite_identity.exceptions import (
    OtpExpiredError,
    OtpMismatchError,
    OtpNotFoundError,
)

if TYPE_CHECKING:
    from coachsite_identity.domain.user import UserRepository
    from coachsite_identity.infrastructure.email import EmailService

logger = logging.getLogger(__name__)


class OtpService:
    """Application service issuing and consuming one-time codes."""

    DEFAULT_LENGTH = 6
    DEFAULT_EXPIRY_MINUTES = 10
    HASH_ROUNDS = 10

    def __init__(
        self,
        user_repository: UserRepository,
        email_service: EmailService,
        length: int = DEFAULT_LENGTH,
        expiry_minutes: int = DEFAULT_EXPIRY_MINUTES,
        hash_rounds: int = HASH_ROUNDS,
    ):
        if length < 1:
            msg = "OTP length must be positive"
            raise ValueError(msg)
        self._user_repo = user_repository
        self._email_service = email_service
        self._length = length
        self._expiry_minutes = expiry_minutes
        self._hash_rounds = hash_rounds

    @property
    def expiry_minutes(self) -> int:
        return self._expiry_minutes

    def generate_code(self) -> str:
        return "".join(secrets.choice(string.digits) for _ in range(self._length))

    async def issue(self, user: User, purpose: OtpPurpose) -> str:
        """Create a code for the user, store its hash and email it.

        Parameters
        ----------
        user
            The account the code is bound to
        purpose
            What the code authorizes; only a verification for the same
            purpose accepts it

        Returns
        -------
        The plaintext code

        Raises
        ------
        EmailDeliveryError
            If the mail relay fails. The code has been saved to the
            session by then; callers roll back to discard it.
        """
        code = self.generate_code()
        code_hash = bcrypt.hashpw(
            code.encode("utf-8"),
            bcrypt.gensalt(rounds=self._hash_rounds),
        ).decode("utf-8")

        user.set_otp(
            code_hash,
            utc_now() + timedelta(minutes=self._expiry_minutes),
            purpose,
        )
        await self._user_repo.save(user)

        await asyncio.to_thread(
            self._email_service.send_otp_email,
            to_email=user.email,
            name=user.name,
            otp=code,
            purpose=purpose.value,
            expiry_minutes=self._expiry_minutes,
        )

        logger.info("Issued %s OTP for user %s", purpose.value, user.id)
        return code

    async def verify(self, user: User, code: str, purpose: OtpPurpose) -> None:
        """Consume the user's pending code.

        On success the code is cleared and, for signup and login codes,
        the user is marked verified. On failure the stored code is kept.

        Raises
        ------
        OtpNotFoundError
            If no code is on record
        OtpExpiredError
            If the code has expired, whether or not it matches
        OtpMismatchError
            If the code does not match or was issued for another purpose
        """
        if not user.has_pending_otp or user.otp_expires_at is None:
            raise OtpNotFoundError

        if utc_now() > user.otp_expires_at:
            logger.info("Expired OTP submitted for user %s", user.id)
            raise OtpExpiredError

        if user.otp_purpose is not None and user.otp_purpose != purpose:
            logger.info(
                "OTP for %s submitted as %s for user %s",
                user.otp_purpose.value,
                purpose.value,
                user.id,
            )
            raise OtpMismatchError

        if not self._matches(code, user.otp_hash):
            logger.info("Mismatched OTP submitted for user %s", user.id)
            raise OtpMismatchError

        user.clear_otp()
        if purpose.marks_verified:
            user.mark_verified()
        await self._user_repo.save(user)

        logger.info("Consumed %s OTP for user %s", purpose.value, user.id)

    @staticmethod
    def _matches(code: str, code_hash: str | None) -> bool:
        if not code or not code_hash:
            return False
        try:
            return bcrypt.checkpw(code.encode("utf-8"), code_hash.encode("utf-8"))
        except (ValueError, TypeError):
            return False
