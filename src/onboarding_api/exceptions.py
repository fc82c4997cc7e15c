"""Domain-specific exceptions for the onboarding API.

These exceptions keep service-layer failures separate from HTTP responses.
"""

from typing import Any


class OnboardingAPIError(Exception):
    """Base exception for all onboarding API errors."""

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class UserCreationError(OnboardingAPIError):
    """Raised when the insert resolved without creating a row."""

    def __init__(self, email: str | None = None) -> None:
        message = "Error while creating user"
        details = {"email": email} if email else {}
        super().__init__(message, details)
