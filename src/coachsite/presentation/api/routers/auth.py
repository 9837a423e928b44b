"""Authentication router: signup, login and password recovery by email code."""

from typing import Annotated

from fastapi import APIRouter, Form, UploadFile, status

from coachsite.presentation.api.dependencies import AuthService, DBSession
from coachsite.presentation.api.identity_errors import (
    IDENTITY_ERRORS,
    to_http_exception,
)
from coachsite.presentation.api.schemas.auth import (
    AuthResponse,
    EmailRequest,
    LoginRequest,
    ResetPasswordRequest,
    SignupResponse,
    VerifyOtpRequest,
)
from coachsite.presentation.api.schemas.common import MessageResponse
from coachsite.presentation.api.schemas.users import user_to_response
from coachsite.presentation.api.uploads import read_upload
from coachsite_identity import User

router = APIRouter()


def _create_auth_response(message: str, user: User, token: str) -> AuthResponse:
    return AuthResponse(message=message, user=user_to_response(user), token=token)


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
    responses={
        201: {"description": "Account created, verification code sent"},
        400: {"description": "Invalid input (weak password, bad email)"},
        409: {"description": "Email already in use"},
        500: {"description": "Email or media host failure"},
    },
)
async def signup(  # NOQA: PLR0913
    name: Annotated[str, Form(min_length=1, max_length=200)],
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    auth_service: AuthService,
    session: DBSession,
    mobile: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    avatar: UploadFile | None = None,
) -> SignupResponse:
    """
    Create an unverified account.

    A verification code is emailed; the account can log in once the code
    is submitted to `/verify-signup-otp`.
    """
    upload = await read_upload(avatar)

    try:
        user = await auth_service.signup(
            name=name,
            email=email,
            password=password,
            mobile=mobile,
            domain_url=domain_url,
            avatar=upload,
        )
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    return SignupResponse(
        message="Signup successful. Please verify the OTP sent to your email.",
        user=user_to_response(user),
    )


@router.post(
    "/verify-signup-otp",
    summary="Verify the signup code",
    responses={
        200: {"description": "Account verified"},
        400: {"description": "Invalid, expired or missing code"},
        404: {"description": "User not found"},
    },
)
async def verify_signup_otp(
    request: VerifyOtpRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    try:
        user, token = await auth_service.verify_signup_otp(
            email=request.email,
            otp=request.otp,
        )
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e

    return _create_auth_response("Email verified successfully", user, token)


@router.post(
    "/login",
    summary="Log in with email and password",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "No password set for this account"},
        401: {"description": "Invalid credentials"},
        403: {"description": "Account not verified"},
        404: {"description": "User not found"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Returns a bearer token valid for the configured number of days.
    """
    try:
        user, token = await auth_service.login(
            email=request.email,
            password=request.password,
        )
    except IDENTITY_ERRORS as e:
        raise to_http_exception(e) from e

    return _create_auth_response("Login successful", user, token)


@router.post(
    "/send-login-otp",
    summary="Email a login code",
    responses={
        200: {"description": "Code sent"},
        404: {"description": "User not found"},
        500: {"description": "Email delivery failed"},
    },
)
async def send_login_otp(
    request: EmailRequest,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    try:
        await auth_service.send_login_otp(request.email)
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="OTP sent to your email")


@router.post(
    "/verify-login-otp",
    summary="Log in with an emailed code",
    responses={
        200: {"description": "Login successful"},
        400: {"description": "Invalid, expired or missing code"},
        404: {"description": "User not found"},
    },
)
async def verify_login_otp(
    request: VerifyOtpRequest,
    auth_service: AuthService,
    session: DBSession,
) -> AuthResponse:
    """
    Exchange a login code for a bearer token.

    A successful code login also marks the account as verified.
    """
    try:
        user, token = await auth_service.verify_login_otp(
            email=request.email,
            otp=request.otp,
        )
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e

    return _create_auth_response("Login successful", user, token)


@router.post(
    "/forgot-password",
    summary="Email a password reset code",
    responses={
        200: {"description": "Code sent"},
        404: {"description": "User not found"},
        500: {"description": "Email delivery failed"},
    },
)
async def forgot_password(
    request: EmailRequest,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    try:
        await auth_service.request_password_reset(request.email)
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Password reset OTP sent to your email")


@router.post(
    "/reset-password",
    summary="Set a new password with a reset code",
    responses={
        200: {"description": "Password changed"},
        400: {"description": "Invalid code or weak password"},
        404: {"description": "User not found"},
    },
)
async def reset_password(
    request: ResetPasswordRequest,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    try:
        await auth_service.reset_password(
            email=request.email,
            otp=request.otp,
            new_password=request.new_password,
        )
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Password reset successful")
