"""Domain models package."""

from onboarding_api.models.domain.user import Department

__all__ = [
    "Department",
]
