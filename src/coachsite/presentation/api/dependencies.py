"""FastAPI dependency injection for the Coachsite API.

Provides dependencies for:
- Database sessions
- Authentication (current user from the bearer token)
- Permission checks attached to routes
- Service instances (tokens, email, media)
"""

import logging
from collections.abc import Callable, Coroutine
from functools import lru_cache
from typing import Annotated, Any, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from coachsite.application.ports import MediaStorage
from coachsite.application.services import AuthenticationService, MediaAssetService
from coachsite.presentation.api.config import get_api_settings
from coachsite_config.settings import Settings
from coachsite_identity import (
    InvalidTokenError,
    JWTService,
    OtpService,
    PasswordHashingService,
    Permission,
    User,
)
from coachsite_identity.infrastructure.email import EmailService
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for bearer tokens
security = HTTPBearer(auto_error=False)

# Every authentication failure gets the same answer
NOT_AUTHORIZED_DETAIL = "Not authorized"


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Created lazily on first use; disposed by the application lifespan.

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_api_settings().database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """
    Get the shared async session maker (singleton).

    Returns
    -------
    async_sessionmaker configured with the shared engine
    """
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


def get_jwt_service(
    settings: Settings = Depends(get_api_settings),
) -> JWTService:
    """Get session token service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_days=settings.jwt_expire_days,
    )


def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


def get_email_service(
    settings: Settings = Depends(get_api_settings),
) -> EmailService:
    return EmailService(settings)


def get_media_storage(request: Request) -> MediaStorage:
    """Get the media storage built at application startup."""
    return request.app.state.media_storage


def get_media_service(
    storage: MediaStorage = Depends(get_media_storage),
) -> MediaAssetService:
    return MediaAssetService(storage)


MediaService = Annotated[MediaAssetService, Depends(get_media_service)]
PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_otp_service(
    session: DBSession,
    settings: SettingsDep,
    email_service: EmailService = Depends(get_email_service),
) -> OtpService:
    return OtpService(
        user_repository=UserRepositorySQLAlchemy(session),
        email_service=email_service,
        length=settings.otp_length,
        expiry_minutes=settings.otp_expiry_minutes,
    )


async def get_authentication_service(  # NOQA: PLR0913
    session: DBSession,
    media_service: MediaService,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
    otp_service: OtpService = Depends(get_otp_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates signup, login and password recovery.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
        otp_service=otp_service,
        media_service=media_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (bearer token authentication)
# -----------------------------------------------------------------------------


def _not_authorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=NOT_AUTHORIZED_DETAIL,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Missing header, bad or expired token and unknown user all produce the
    same 401 response; the reason is only logged.

    Raises
    ------
    HTTPException
        401 if the request is not authenticated
    """
    if credentials is None:
        logger.debug("Request without bearer token")
        raise _not_authorized()

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise _not_authorized() from e

    user_repo = UserRepositorySQLAlchemy(session)
    user = await user_repo.find_by_id(payload.user_id)

    if user is None:
        logger.warning("User not found for token: %s", payload.user_id)
        raise _not_authorized()

    return user


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]


# -----------------------------------------------------------------------------
# Authorization
# -----------------------------------------------------------------------------


def require_permission(
    permission: Permission,
) -> Callable[..., Coroutine[Any, Any, User]]:
    """Build a dependency that admits users whose role grants ``permission``.

    Examples
    --------
    >>> @router.get("/", dependencies=[Depends(require_permission(Permission.MANAGE_USERS))])
    """

    async def _check_permission(user: User = Depends(get_current_user)) -> User:
        if not user.can(permission):
            logger.info(
                "User %s (role %s) denied permission %s",
                user.id,
                user.role.value,
                permission.value,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="You do not have permission to perform this action",
            )
        return user

    return _check_permission


# Type aliases for permission-checked users
AdminUser = Annotated[User, Depends(require_permission(Permission.MANAGE_USERS))]
ContentEditor = Annotated[
    User,
    Depends(require_permission(Permission.MANAGE_OWN_CONTENT)),
]
