"""Onboarding form client package."""

from onboarding_api.client.api import UserAPIClient
from onboarding_api.client.form import OnboardingForm, SubmitOutcome
from onboarding_api.client.notifications import Toast, ToastVariant

__all__ = [
    "OnboardingForm",
    "SubmitOutcome",
    "Toast",
    "ToastVariant",
    "UserAPIClient",
]
