"""Mapping of identity exceptions to HTTP errors.

Identity errors are not domain exceptions, so routers catch them and
translate them here. Plain ``ValueError`` from entity validation (blank
name, malformed email) becomes a 400.
"""

from fastapi import HTTPException, status

from coachsite_identity import (
    AccountNotVerifiedError,
    AlreadyVerifiedError,
    AuthError,
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    OtpError,
    PasswordNotSetError,
    UserNotFoundError,
    WeakPasswordError,
)

IDENTITY_ERRORS: tuple[type[Exception], ...] = (
    AuthError,
    CannotDeleteSelfError,
    CannotDemoteSelfError,
    EmailAlreadyExistsError,
    UserNotFoundError,
    ValueError,
)


def to_http_exception(error: Exception) -> HTTPException:  # NOQA: PLR0911
    """Translate an identity exception into the matching HTTP error."""
    if isinstance(error, UserNotFoundError):
        return HTTPException(status.HTTP_404_NOT_FOUND, "User not found")
    if isinstance(error, EmailAlreadyExistsError):
        return HTTPException(status.HTTP_409_CONFLICT, "Email already in use")
    if isinstance(error, InvalidCredentialsError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, error.message)
    if isinstance(error, AccountNotVerifiedError):
        return HTTPException(status.HTTP_403_FORBIDDEN, error.message)
    if isinstance(error, (CannotDeleteSelfError, CannotDemoteSelfError)):
        return HTTPException(status.HTTP_400_BAD_REQUEST, str(error))
    if isinstance(
        error,
        (
            AlreadyVerifiedError,
            OtpError,
            PasswordNotSetError,
            WeakPasswordError,
        ),
    ):
        return HTTPException(status.HTTP_400_BAD_REQUEST, error.message)
    if isinstance(error, AuthError):
        return HTTPException(status.HTTP_401_UNAUTHORIZED, error.message)
    return HTTPException(status.HTTP_400_BAD_REQUEST, str(error))
