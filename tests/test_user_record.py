"""Tests for onboarding record validation."""

import pytest
from pydantic import ValidationError

from onboarding_api.models.domain.user import Department
from onboarding_api.models.dto.user import USER_FIELDS, UserRecord, collect_field_errors

from conftest import VALID_BODY

VALID_VALUES = {k: v for k, v in VALID_BODY.items() if k != "employee_id"}


def _errors(**overrides: str) -> dict[str, str]:
    try:
        UserRecord.model_validate({**VALID_VALUES, **overrides})
    except ValidationError as e:
        return collect_field_errors(e)
    return {}


class TestUserRecord:
    """Test the declarative field rules."""

    def test_valid_record(self) -> None:
        record = UserRecord.model_validate(VALID_VALUES)

        assert record.department is Department.ENGINEERING
        assert record.model_dump(mode="json") == VALID_VALUES

    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("first_name", "First Name is required"),
            ("last_name", "Last Name is required"),
            ("role", "Role is required"),
            ("department", "Department is required"),
            ("date_of_joining", "Date of joining is required"),
            ("email", "Invalid email address"),
            ("phone_number", "Phone must be 10 digits"),
        ],
    )
    def test_empty_field_message(self, field: str, message: str) -> None:
        assert _errors(**{field: ""}) == {field: message}

    def test_all_errors_reported_at_once(self) -> None:
        """Validation does not stop at the first failing field."""
        errors = _errors(**{field: "" for field in USER_FIELDS})

        assert list(errors) == list(USER_FIELDS)

    @pytest.mark.parametrize("phone", ["5551234567", "0000000000"])
    def test_phone_accepts_ten_digits(self, phone: str) -> None:
        assert _errors(phone_number=phone) == {}

    @pytest.mark.parametrize(
        "phone",
        [
            "555-123-4567",
            "12345",
            "55512345678",
            " 5551234567",
            "5551234567\n",
            "555123456a",
            "٥٥٥١٢٣٤٥٦٧",
        ],
    )
    def test_phone_rejects_anything_else(self, phone: str) -> None:
        assert _errors(phone_number=phone) == {"phone_number": "Phone must be 10 digits"}

    @pytest.mark.parametrize("department", ["HR", "Engineering", "Marketing"])
    def test_department_accepts_known_values(self, department: str) -> None:
        assert _errors(department=department) == {}

    @pytest.mark.parametrize("department", ["Sales", "hr", "ENGINEERING"])
    def test_department_rejects_other_values(self, department: str) -> None:
        assert _errors(department=department) == {"department": "Invalid department"}

    @pytest.mark.parametrize(
        "email",
        [
            "not-an-email",
            "ada@",
            "@example.com",
            "ada example.com",
            "Ada <ada@example.com>",
            "Ada Lovelace <ada@example.com>",
            "<ada@example.com>",
        ],
    )
    def test_invalid_email(self, email: str) -> None:
        assert _errors(email=email) == {"email": "Invalid email address"}

    @pytest.mark.parametrize("value", ["15/01/2024", "2024-13-01", "2024-02-30", "20240115"])
    def test_invalid_date(self, value: str) -> None:
        assert _errors(date_of_joining=value) == {"date_of_joining": "Invalid date"}

    def test_whitespace_name_is_accepted(self) -> None:
        """Only the empty string counts as missing."""
        assert _errors(first_name=" ") == {}
