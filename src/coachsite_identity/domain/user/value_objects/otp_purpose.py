from enum import Enum


class OtpPurpose(str, Enum):
    """What a one-time code authorizes. The value is used in email copy."""

    SIGNUP_VERIFICATION = "signup verification"
    LOGIN = "login"
    PASSWORD_RESET = "password reset"

    @property
    def marks_verified(self) -> bool:
        """Whether consuming the code proves ownership of the email."""
        return self in (OtpPurpose.SIGNUP_VERIFICATION, OtpPurpose.LOGIN)
