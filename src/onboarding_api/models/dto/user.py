"""User DTOs."""

import re
from datetime import date
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from onboarding_api.models.domain.user import Department

PHONE_PATTERN = re.compile(r"[0-9]{10}")
ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

# Field order used by the form and by error reporting
USER_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "department",
    "role",
    "date_of_joining",
)


def _required(value: Any, message: str) -> Any:
    if value is None or value == "":
        raise PydanticCustomError("required", message)
    return value


class UserRecord(BaseModel):
    """Onboarding record as validated by the form before submission."""

    first_name: str
    last_name: str
    email: str
    phone_number: str
    department: Department
    role: str
    date_of_joining: str

    @field_validator("first_name", mode="before")
    @classmethod
    def _first_name(cls, value: Any) -> Any:
        return _required(value, "First Name is required")

    @field_validator("last_name", mode="before")
    @classmethod
    def _last_name(cls, value: Any) -> Any:
        return _required(value, "Last Name is required")

    @field_validator("role", mode="before")
    @classmethod
    def _role(cls, value: Any) -> Any:
        return _required(value, "Role is required")

    @field_validator("email", mode="before")
    @classmethod
    def _email(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise PydanticCustomError("invalid_email", "Invalid email address")
        try:
            _, normalized = validate_email(value)
        except PydanticCustomError:
            raise PydanticCustomError("invalid_email", "Invalid email address") from None
        # validate_email also accepts the "Name <addr>" display form
        if "<" in value or normalized.lower() != value.lower():
            raise PydanticCustomError("invalid_email", "Invalid email address")
        return value

    @field_validator("phone_number", mode="before")
    @classmethod
    def _phone_number(cls, value: Any) -> Any:
        if not isinstance(value, str) or not PHONE_PATTERN.fullmatch(value):
            raise PydanticCustomError("invalid_phone", "Phone must be 10 digits")
        return value

    @field_validator("department", mode="before")
    @classmethod
    def _department(cls, value: Any) -> Any:
        _required(value, "Department is required")
        if not isinstance(value, str) or value not in {d.value for d in Department}:
            raise PydanticCustomError("invalid_department", "Invalid department")
        return value

    @field_validator("date_of_joining", mode="before")
    @classmethod
    def _date_of_joining(cls, value: Any) -> Any:
        _required(value, "Date of joining is required")
        if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
            raise PydanticCustomError("invalid_date", "Invalid date")
        try:
            date.fromisoformat(value)
        except ValueError:
            raise PydanticCustomError("invalid_date", "Invalid date") from None
        return value


def collect_field_errors(exc: ValidationError) -> dict[str, str]:
    """Map a validation error to the first message reported for each field.

    Args:
        exc: Validation error raised by UserRecord

    Returns:
        Dict of field name to error message, in form field order
    """
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error.get("loc", ())
        field = loc[0] if loc else "__root__"
        if isinstance(field, str) and field not in errors:
            errors[field] = error.get("msg", "Invalid value")
    return {field: errors[field] for field in USER_FIELDS if field in errors}


class AddUserRequest(BaseModel):
    """Request body accepted by POST /users/add_user.

    Field contents are not checked here; the store's constraints decide.
    Numbers are accepted and bound as strings.
    ``employee_id`` is accepted and never bound to the insert.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    employee_id: Any = None
    phone_number: str | None = None
    department: str | None = None
    role: str | None = None
    date_of_joining: str | None = None


class StatusResponse(BaseModel):
    """Status envelope returned by the user endpoints."""

    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    msg: str
