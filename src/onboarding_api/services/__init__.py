"""Services package."""

from onboarding_api.services.user_service import UserService

__all__ = [
    "UserService",
]
