"""Onboarding form component.

Holds field values, validates them against ``UserRecord`` and submits the
record to the API once per submit action.
"""

import logging
from datetime import date
from enum import StrEnum

import httpx
from pydantic import ValidationError

from onboarding_api.client.api import UserAPIClient
from onboarding_api.client.notifications import (
    NETWORK_ERROR_TOAST,
    SERVER_ERROR_TOAST,
    SUCCESS_TOAST,
    Notifier,
    log_notifier,
)
from onboarding_api.models.domain.user import Department
from onboarding_api.models.dto.user import USER_FIELDS, UserRecord, collect_field_errors

logger = logging.getLogger(__name__)

# Fields edited as free text; department and date have their own controls
TEXT_FIELDS = frozenset({"first_name", "last_name", "email", "phone_number", "role"})


class SubmitOutcome(StrEnum):
    """Result of one submit action."""

    SUCCESS = "success"
    SERVER_ERROR = "server_error"
    NETWORK_ERROR = "network_error"
    INVALID = "invalid"
    BUSY = "busy"


class OnboardingForm:
    """Employee onboarding form."""

    def __init__(self, api: UserAPIClient, notify: Notifier = log_notifier) -> None:
        self.api = api
        self.notify = notify
        self.values: dict[str, str] = {field: "" for field in USER_FIELDS}
        self.errors: dict[str, str] = {}
        self.loading = False

    @staticmethod
    def department_options() -> list[str]:
        """Values offered by the department selector."""
        return [department.value for department in Department]

    @property
    def submit_disabled(self) -> bool:
        return self.loading

    @property
    def submit_label(self) -> str:
        return "Submitting..." if self.loading else "Submit"

    def set_value(self, field: str, value: str) -> None:
        """Set a free-text field.

        Raises:
            KeyError: If the field is not a free-text input
        """
        if field not in TEXT_FIELDS:
            raise KeyError(field)
        self.values[field] = value

    def select_department(self, department: Department | str) -> None:
        """Choose a department from the selector.

        Raises:
            ValueError: If the value is not one of the offered departments
        """
        self.values["department"] = Department(department).value

    def pick_date(self, value: date | None) -> None:
        """Set the date of joining from the date picker, or clear it."""
        self.values["date_of_joining"] = value.isoformat() if value else ""

    def validate(self) -> UserRecord | None:
        """Validate every field and record the first error of each.

        Returns:
            The validated record, or None when any field failed
        """
        try:
            record = UserRecord.model_validate(self.values)
        except ValidationError as e:
            self.errors = collect_field_errors(e)
            return None
        self.errors = {}
        return record

    async def submit(self) -> SubmitOutcome:
        """Handle one submit action.

        Makes at most one request. Field values are left untouched whatever
        the outcome, and the busy state is always cleared.
        """
        if self.loading:
            return SubmitOutcome.BUSY

        record = self.validate()
        if record is None:
            return SubmitOutcome.INVALID

        self.loading = True
        try:
            response = await self.api.add_user(record)
            if response.is_success:
                self.notify(SUCCESS_TOAST)
                return SubmitOutcome.SUCCESS
            logger.warning(f"Form submission rejected with status {response.status_code}")
            self.notify(SERVER_ERROR_TOAST)
            return SubmitOutcome.SERVER_ERROR
        except httpx.TransportError as e:
            logger.error(f"Error submitting form: {type(e).__name__}")
            self.notify(NETWORK_ERROR_TOAST)
            return SubmitOutcome.NETWORK_ERROR
        finally:
            self.loading = False
