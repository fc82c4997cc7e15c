"""User ORM model."""

from datetime import date

from sqlalchemy import Date, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from onboarding_api.models.orm.base import Base, CreatedAtMixin


class UserORM(Base, CreatedAtMixin):
    """Onboarded user database model."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone_number: Mapped[str] = mapped_column(String(20), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(255), nullable=False)
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("idx_users_department", "department"),
    )
