"""SQLAlchemy ORM models package."""

from onboarding_api.models.orm.base import Base
from onboarding_api.models.orm.user import UserORM

__all__ = [
    "Base",
    "UserORM",
]
