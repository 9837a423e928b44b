"""Ownership rules shared by banner and testimonial commands."""

from uuid import UUID

from coachsite.domain.homepage import (
    ContentAccessDeniedError,
    ContentOwnerNotFoundError,
    HomePage,
    HomePageRepository,
)
from coachsite.domain.shared.exceptions import ForbiddenError
from coachsite_identity import Permission, User, UserRepository


async def resolve_owner(
    requesting_user: User,
    user_id: UUID | None,
    user_repository: UserRepository,
) -> User:
    """Return the user new content is created for.

    Callers create for themselves unless they may manage any content.
    """
    if user_id is None or user_id == requesting_user.id:
        return requesting_user

    if not requesting_user.can(Permission.MANAGE_ANY_CONTENT):
        msg = "You cannot create content for another user"
        raise ForbiddenError(msg)

    owner = await user_repository.find_by_id(user_id)
    if owner is None:
        raise ContentOwnerNotFoundError(user_id)
    return owner


def ensure_can_modify(
    requesting_user: User,
    owner_id: UUID,
    resource: str,
    resource_id: UUID,
) -> None:
    if owner_id == requesting_user.id:
        return
    if not requesting_user.can(Permission.MANAGE_ANY_CONTENT):
        raise ContentAccessDeniedError(resource, resource_id)


async def get_or_create_home_page(
    home_page_repository: HomePageRepository,
    user_id: UUID,
) -> HomePage:
    home_page = await home_page_repository.find_by_user_id(user_id)
    if home_page is None:
        home_page = HomePage.create(user_id)
        await home_page_repository.save(home_page)
    return home_page
