"""Data Transfer Objects package."""

from onboarding_api.models.dto.user import (
    AddUserRequest,
    StatusResponse,
    UserRecord,
    collect_field_errors,
)

__all__ = [
    "AddUserRequest",
    "StatusResponse",
    "UserRecord",
    "collect_field_errors",
]
