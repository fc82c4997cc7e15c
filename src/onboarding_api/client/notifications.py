"""Notifications emitted by the onboarding form."""

import logging
from collections.abc import Callable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class ToastVariant(StrEnum):
    """Visual variant of a notification."""

    SUCCESS = "success"
    DESTRUCTIVE = "destructive"


class Toast(BaseModel):
    """Notification handed to the presentation layer."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    variant: ToastVariant


SUCCESS_TOAST = Toast(
    title="Success!",
    description="Form submitted successfully. Your data has been saved.",
    variant=ToastVariant.SUCCESS,
)

SERVER_ERROR_TOAST = Toast(
    title="Error",
    description="Something went wrong while submitting the form.",
    variant=ToastVariant.DESTRUCTIVE,
)

NETWORK_ERROR_TOAST = Toast(
    title="Network Error",
    description="Failed to submit form. Please check your internet connection.",
    variant=ToastVariant.DESTRUCTIVE,
)

Notifier = Callable[[Toast], None]


def log_notifier(toast: Toast) -> None:
    """Default notifier that writes toasts to the log."""
    level = logging.INFO if toast.variant == ToastVariant.SUCCESS else logging.WARNING
    logger.log(level, f"{toast.title} {toast.description}")
