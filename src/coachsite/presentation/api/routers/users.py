"""Users router: the caller's own profile and administrator user management."""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Form, UploadFile, status

from coachsite.application.commands.users import (
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from coachsite.infrastructure.persistence.sqlalchemy import (
    BannerRepositorySQLAlchemy,
    HomePageRepositorySQLAlchemy,
    TestimonialRepositorySQLAlchemy,
)
from coachsite.presentation.api.dependencies import (
    AdminUser,
    CurrentUser,
    DBSession,
    MediaService,
    PasswordService,
)
from coachsite.presentation.api.identity_errors import (
    IDENTITY_ERRORS,
    to_http_exception,
)
from coachsite.presentation.api.schemas.common import MessageResponse
from coachsite.presentation.api.schemas.users import (
    UserEnvelope,
    UserListResponse,
    user_to_response,
)
from coachsite.presentation.api.uploads import read_upload
from coachsite_identity import UserNotFoundError, UserRole
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _delete_command(session: DBSession, media: MediaService) -> DeleteUserCommand:
    return DeleteUserCommand(
        user_repository=UserRepositorySQLAlchemy(session),
        home_page_repository=HomePageRepositorySQLAlchemy(session),
        banner_repository=BannerRepositorySQLAlchemy(session),
        testimonial_repository=TestimonialRepositorySQLAlchemy(session),
        media_service=media,
    )


# -----------------------------------------------------------------------------
# Own profile
# -----------------------------------------------------------------------------


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user profile"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(current_user: CurrentUser) -> UserEnvelope:
    return UserEnvelope(
        message="User fetched successfully",
        user=user_to_response(current_user),
    )


@router.put(
    "/me",
    summary="Update current user",
    responses={
        200: {"description": "Profile updated"},
        401: {"description": "Not authenticated"},
        500: {"description": "Media host failure"},
    },
)
async def update_me(  # NOQA: PLR0913
    current_user: CurrentUser,
    session: DBSession,
    media: MediaService,
    name: Annotated[str | None, Form(min_length=1, max_length=200)] = None,
    mobile: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    avatar: UploadFile | None = None,
) -> UserEnvelope:
    """Merge the supplied fields into the caller's profile.

    A new avatar replaces the previous one, which is then removed from the
    media host.
    """
    upload = await read_upload(avatar)
    command = UpdateUserCommand(UserRepositorySQLAlchemy(session), media)

    try:
        user = await command.execute(
            user_id=current_user.id,
            requesting_user=current_user,
            name=name,
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

    return UserEnvelope(message="Profile updated successfully", user=user_to_response(user))


@router.delete(
    "/me",
    summary="Delete current user",
    responses={
        200: {"description": "Account and homepage content deleted"},
        401: {"description": "Not authenticated"},
    },
)
async def delete_me(
    current_user: CurrentUser,
    session: DBSession,
    media: MediaService,
) -> MessageResponse:
    try:
        await _delete_command(session, media).execute(current_user.id)
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    logger.info("User %s deleted their account", current_user.id)
    return MessageResponse(message="Account deleted successfully")


# -----------------------------------------------------------------------------
# Administration
# -----------------------------------------------------------------------------


@router.get(
    "",
    summary="List all users",
    responses={
        200: {"description": "List of all users"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(
    _admin: AdminUser,  # Used for authorization check
    session: DBSession,
) -> UserListResponse:
    users = await UserRepositorySQLAlchemy(session).list_all()
    return UserListResponse(
        message="Users fetched successfully",
        users=[user_to_response(u) for u in users],
        total=len(users),
    )


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    summary="Create a verified user",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Invalid input"},
        403: {"description": "Admin access required"},
        409: {"description": "Email already in use"},
    },
)
async def create_user(  # NOQA: PLR0913
    _admin: AdminUser,
    session: DBSession,
    media: MediaService,
    password_service: PasswordService,
    name: Annotated[str, Form(min_length=1, max_length=200)],
    email: Annotated[str, Form()],
    password: Annotated[str, Form()],
    role: Annotated[UserRole, Form()] = UserRole.USER,
    mobile: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    avatar: UploadFile | None = None,
) -> UserEnvelope:
    """Create an account that can log in immediately (admin only)."""
    upload = await read_upload(avatar)
    command = CreateUserCommand(
        UserRepositorySQLAlchemy(session),
        password_service,
        media,
    )

    try:
        user = await command.execute(
            name=name,
            email=email,
            password=password,
            role=role,
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

    logger.info("Admin created user: %s (role=%s)", user.email, user.role.value)
    return UserEnvelope(message="User created successfully", user=user_to_response(user))


@router.get(
    "/{user_id}",
    summary="Get a user",
    responses={
        200: {"description": "User profile"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UUID,
    _admin: AdminUser,
    session: DBSession,
) -> UserEnvelope:
    user = await UserRepositorySQLAlchemy(session).find_by_id(user_id)
    if user is None:
        raise to_http_exception(UserNotFoundError(str(user_id)))
    return UserEnvelope(message="User fetched successfully", user=user_to_response(user))


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Cannot demote yourself"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def update_user(  # NOQA: PLR0913
    user_id: UUID,
    admin: AdminUser,
    session: DBSession,
    media: MediaService,
    name: Annotated[str | None, Form(min_length=1, max_length=200)] = None,
    mobile: Annotated[str | None, Form()] = None,
    domain_url: Annotated[str | None, Form()] = None,
    role: Annotated[UserRole | None, Form()] = None,
    avatar: UploadFile | None = None,
) -> UserEnvelope:
    upload = await read_upload(avatar)
    command = UpdateUserCommand(UserRepositorySQLAlchemy(session), media)

    try:
        user = await command.execute(
            user_id=user_id,
            requesting_user=admin,
            name=name,
            mobile=mobile,
            domain_url=domain_url,
            role=role,
            avatar=upload,
        )
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    return UserEnvelope(message="User updated successfully", user=user_to_response(user))


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    responses={
        200: {"description": "User and homepage content deleted"},
        400: {"description": "Cannot delete yourself"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: UUID,
    admin: AdminUser,
    session: DBSession,
    media: MediaService,
) -> MessageResponse:
    """Delete a user with their banners, testimonials and homepage (admin only)."""
    try:
        await _delete_command(session, media).execute(
            user_id,
            requesting_admin_id=admin.id,
        )
        await session.commit()
    except IDENTITY_ERRORS as e:
        await session.rollback()
        raise to_http_exception(e) from e
    except Exception:
        await session.rollback()
        raise

    logger.info("Admin %s deleted user %s", admin.id, user_id)
    return MessageResponse(message="User deleted successfully")
