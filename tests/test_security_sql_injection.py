"""SQL Injection prevention tests.

The insert binds every value as a parameter, so hostile strings are stored
verbatim and never change the statement. The form schema additionally rejects
them wherever a field has a strict format.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy import select

from onboarding_api.models.dto.user import UserRecord, collect_field_errors
from onboarding_api.models.orm import UserORM
from onboarding_api.queries import USER_QUERIES

from conftest import VALID_BODY, count_users

# SQL Injection payloads to test
SQL_INJECTION_PAYLOADS = [
    "'; DROP TABLE users; --",
    "1' OR '1'='1",
    "1; DELETE FROM users WHERE '1'='1",
    "' UNION SELECT * FROM users --",
    "1'; INSERT INTO users (email) VALUES ('hacked@evil.com'); --",
    "1'; SELECT pg_sleep(5) --",
    "$$; DROP TABLE users; $$",
    "1'/**/OR/**/1=1--",
    "ʼ; DROP TABLE users; --",
]


class TestParameterizedInsert:
    """Test that hostile values are stored as data."""

    @pytest.mark.anyio
    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS)
    async def test_payload_stored_verbatim(self, api_client, database, payload: str) -> None:
        response = await api_client.post(
            "/users/add_user", json={**VALID_BODY, "first_name": payload, "role": payload}
        )

        assert response.status_code == 200
        assert await count_users(database) == 1

        async with database.connect() as connection:
            row = (await connection.execute(select(UserORM.first_name, UserORM.role))).one()
        assert row.first_name == payload
        assert row.role == payload

    def test_insert_template_has_only_placeholders(self) -> None:
        """The template carries named binds and no literal values."""
        compiled = USER_QUERIES.create_user.compile()

        assert set(compiled.params) == {
            "first_name",
            "last_name",
            "email",
            "phone_number",
            "department",
            "role",
            "date_of_joining",
        }
        assert "'" not in str(compiled)


class TestFormRejectsPayloads:
    """Test that strict fields reject hostile input before submission."""

    @pytest.mark.parametrize("payload", SQL_INJECTION_PAYLOADS)
    @pytest.mark.parametrize("field", ["email", "phone_number", "department", "date_of_joining"])
    def test_strict_field_rejects_payload(self, field: str, payload: str) -> None:
        values = {k: v for k, v in VALID_BODY.items() if k != "employee_id"}
        values[field] = payload

        with pytest.raises(ValidationError) as exc_info:
            UserRecord.model_validate(values)

        assert list(collect_field_errors(exc_info.value)) == [field]
