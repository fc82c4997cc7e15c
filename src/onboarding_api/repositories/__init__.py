"""Repository package."""

from onboarding_api.repositories.user_repository import UserRepository

__all__ = [
    "UserRepository",
]
