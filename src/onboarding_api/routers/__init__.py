"""API routers package."""

from onboarding_api.routers import users

__all__ = [
    "users",
]
