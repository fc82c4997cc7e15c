"""User service for onboarding new employees."""

import logging

from onboarding_api.database import Database
from onboarding_api.exceptions import UserCreationError
from onboarding_api.models.dto.user import AddUserRequest
from onboarding_api.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for creating onboarded users."""

    def __init__(self, database: Database) -> None:
        """Initialize service with the shared connection pool."""
        self.database = database

    async def add_user(self, data: AddUserRequest) -> None:
        """Insert a user using one pooled connection.

        Each call is an independent insert; identical payloads are not
        deduplicated.

        Args:
            data: Request body

        Raises:
            UserCreationError: If the insert resolved without creating a row
        """
        async with self.database.connect() as connection:
            result = await UserRepository(connection).create(data)
            created = bool(result) and result.rowcount > 0

        if not created:
            raise UserCreationError(data.email)

        logger.info("User created", extra={"department": data.department})
