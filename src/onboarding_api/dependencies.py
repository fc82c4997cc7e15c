"""Dependency injection factories for FastAPI."""

from fastapi import Depends

from onboarding_api.database import Database, get_database
from onboarding_api.services.user_service import UserService


def get_user_service(database: Database = Depends(get_database)) -> UserService:
    """Get UserService instance."""
    return UserService(database)
