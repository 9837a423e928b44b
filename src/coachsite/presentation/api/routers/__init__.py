"""API routers."""

from coachsite.presentation.api.routers.auth import router as auth_router
from coachsite.presentation.api.routers.banners import router as banners_router
from coachsite.presentation.api.routers.homepage import router as homepage_router
from coachsite.presentation.api.routers.testimonials import (
    router as testimonials_router,
)
from coachsite.presentation.api.routers.users import router as users_router

__all__ = [
    "auth_router",
    "banners_router",
    "homepage_router",
    "testimonials_router",
    "users_router",
]
