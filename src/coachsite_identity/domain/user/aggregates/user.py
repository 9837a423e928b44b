"""User aggregate: identity and credential record of a coach or admin."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from coachsite.domain.shared.media_asset import MediaAsset
from coachsite.domain.shared.time import ensure_tz_aware, utc_now
from coachsite_identity.domain.user.value_objects import (
    Email,
    OtpPurpose,
    Permission,
    UserRole,
    role_has_permission,
)


class User:
    """
    User aggregate root.

    Holds the login identity (email, optional password hash), the profile
    shown on the coach's site and the pending one-time code, if any. The
    code hash and its expiry are always set or cleared together; the code
    is bound to the purpose it was issued for.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: str,
        role: Union[str, UserRole] = UserRole.USER,
        mobile: str | None = None,
        domain_url: str | None = None,
        password_hash: str | None = None,
        is_verified: bool = False,
        avatar: MediaAsset | None = None,
        otp_hash: str | None = None,
        otp_expires_at: datetime | None = None,
        otp_purpose: Union[str, OtpPurpose, None] = None,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        if (otp_hash is None) != (otp_expires_at is None):
            msg = "OTP hash and expiry must be set together"
            raise ValueError(msg)

        self._email = email if isinstance(email, Email) else Email(email)
        self._id = id or uuid4()
        self._name = (name or "").strip()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._mobile = mobile
        self._domain_url = domain_url
        self._password_hash = password_hash
        self._is_verified = is_verified
        self._avatar = avatar
        self._otp_hash = otp_hash
        self._otp_expires_at = (
            ensure_tz_aware(otp_expires_at) if otp_expires_at else None
        )
        self._otp_purpose = OtpPurpose(otp_purpose) if otp_purpose else None
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

        if not self._name:
            msg = "Name cannot be empty"
            raise ValueError(msg)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def email_obj(self) -> Email:
        return self._email

    @property
    def name(self) -> str:
        return self._name

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN

    @property
    def mobile(self) -> str | None:
        return self._mobile

    @property
    def domain_url(self) -> str | None:
        return self._domain_url

    @property
    def password_hash(self) -> str | None:
        return self._password_hash

    @property
    def has_password(self) -> bool:
        return bool(self._password_hash)

    @property
    def is_verified(self) -> bool:
        return self._is_verified

    @property
    def avatar(self) -> MediaAsset | None:
        return self._avatar

    @property
    def otp_hash(self) -> str | None:
        return self._otp_hash

    @property
    def otp_expires_at(self) -> datetime | None:
        return self._otp_expires_at

    @property
    def otp_purpose(self) -> OtpPurpose | None:
        return self._otp_purpose

    @property
    def has_pending_otp(self) -> bool:
        return self._otp_hash is not None

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def can(self, permission: Permission) -> bool:
        return role_has_permission(self._role, permission)

    def set_otp(
        self,
        otp_hash: str,
        expires_at: datetime,
        purpose: OtpPurpose,
    ) -> None:
        """Store a new one-time code, replacing any pending one."""
        self._otp_hash = otp_hash
        self._otp_expires_at = ensure_tz_aware(expires_at)
        self._otp_purpose = purpose
        self._updated_at = utc_now()

    def clear_otp(self) -> None:
        self._otp_hash = None
        self._otp_expires_at = None
        self._otp_purpose = None
        self._updated_at = utc_now()

    def mark_verified(self) -> None:
        self._is_verified = True
        self._updated_at = utc_now()

    def change_password(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._updated_at = utc_now()

    def update_profile(
        self,
        name: str | None = None,
        mobile: str | None = None,
        domain_url: str | None = None,
    ) -> None:
        """Merge profile fields; ``None`` leaves a field untouched."""
        if name is not None:
            if not name.strip():
                msg = "Name cannot be empty"
                raise ValueError(msg)
            self._name = name.strip()
        if mobile is not None:
            self._mobile = mobile
        if domain_url is not None:
            self._domain_url = domain_url
        self._updated_at = utc_now()

    def change_role(self, role: UserRole) -> None:
        self._role = role
        self._updated_at = utc_now()

    def replace_avatar(self, avatar: MediaAsset) -> MediaAsset | None:
        """Set a new avatar and return the one it replaced, if any."""
        previous = self._avatar
        self._avatar = avatar
        self._updated_at = utc_now()
        return previous

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        email: Union[str, Email],
        name: str,
        role: UserRole = UserRole.USER,
        mobile: str | None = None,
        domain_url: str | None = None,
        password_hash: str | None = None,
        is_verified: bool = False,
        avatar: MediaAsset | None = None,
    ) -> "User":
        return cls(
            email=email,
            name=name,
            role=role,
            mobile=mobile,
            domain_url=domain_url,
            password_hash=password_hash,
            is_verified=is_verified,
            avatar=avatar,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str,
        role: Union[str, UserRole],
        mobile: str | None,
        domain_url: str | None,
        password_hash: str | None,
        is_verified: bool,
        avatar: MediaAsset | None,
        otp_hash: str | None,
        otp_expires_at: datetime | None,
        otp_purpose: Union[str, OtpPurpose, None],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            role=role,
            mobile=mobile,
            domain_url=domain_url,
            password_hash=password_hash,
            is_verified=is_verified,
            avatar=avatar,
            otp_hash=otp_hash,
            otp_expires_at=otp_expires_at,
            otp_purpose=otp_purpose,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
