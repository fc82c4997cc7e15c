"""User repository."""

from datetime import date
from typing import Any

from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncConnection

from onboarding_api.models.dto.user import AddUserRequest
from onboarding_api.queries import USER_QUERIES


class UserRepository:
    """Repository for the users table."""

    def __init__(self, connection: AsyncConnection) -> None:
        """Initialize repository with a checked-out connection."""
        self.connection = connection

    @staticmethod
    def _insert_params(data: AddUserRequest) -> dict[str, Any]:
        """Build the seven bound parameters of the insert.

        employee_id is deliberately not among them.
        """
        date_of_joining: date | str | None = data.date_of_joining
        if isinstance(date_of_joining, str):
            # Raises ValueError for anything that is not an ISO date
            date_of_joining = date.fromisoformat(date_of_joining)

        return {
            "first_name": data.first_name,
            "last_name": data.last_name,
            "email": data.email,
            "phone_number": data.phone_number,
            "department": data.department,
            "role": data.role,
            "date_of_joining": date_of_joining,
        }

    async def create(self, data: AddUserRequest) -> CursorResult:
        """Insert one user row.

        Args:
            data: Request body

        Returns:
            Result of the insert statement
        """
        return await self.connection.execute(USER_QUERIES.create_user, self._insert_params(data))
