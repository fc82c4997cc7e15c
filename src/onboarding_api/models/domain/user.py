"""User domain model."""

from enum import StrEnum


class Department(StrEnum):
    """Departments a new employee can join.

    Shared by the form schema and the department selector.
    """

    HR = "HR"
    ENGINEERING = "Engineering"
    MARKETING = "Marketing"
