"""Identity and authentication exceptions.

These exceptions are raised by the coachsite_identity package and are
mapped to HTTP responses by the API routers.
"""

from coachsite.domain.shared.exceptions import ErrorCode, UpstreamError


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a session token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when the password is incorrect during login."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class PasswordNotSetError(AuthError):
    """Raised on password login for an account that only uses OTP."""

    def __init__(self, message: str = "Password not set. Use OTP login."):
        super().__init__(message)


class AccountNotVerifiedError(AuthError):
    """Raised when an unverified account attempts password login."""

    def __init__(self, message: str = "Please verify your email first"):
        super().__init__(message)


class AlreadyVerifiedError(AuthError):
    """Raised when signup verification is repeated for a verified account."""

    def __init__(self, message: str = "User already verified"):
        super().__init__(message)


class OtpError(AuthError):
    """Base exception for one-time code verification failures."""


class OtpNotFoundError(OtpError):
    """Raised when no one-time code is on record for the user."""

    def __init__(self, message: str = "OTP not present. Request a new code."):
        super().__init__(message)


class OtpExpiredError(OtpError):
    """Raised when the stored one-time code has passed its expiry."""

    def __init__(self, message: str = "OTP expired. Request a new code."):
        super().__init__(message)


class OtpMismatchError(OtpError):
    """Raised when the submitted code does not match the stored hash."""

    def __init__(self, message: str = "Invalid OTP"):
        super().__init__(message)


class EmailDeliveryError(UpstreamError):
    """Raised when the mail relay rejects or cannot accept a message."""

    def __init__(self, recipient: str) -> None:
        super().__init__(
            message="Failed to send email",
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            details={"recipient": recipient},
        )
