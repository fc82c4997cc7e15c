"""Parameterized SQL templates."""

from sqlalchemy import Date, bindparam, text


class UserQueries:
    """SQL statements used by the user endpoints."""

    # date_of_joining is typed so drivers receive a date, not a string
    create_user = text(
        """
        INSERT INTO users (
            first_name, last_name, email, phone_number, department, role, date_of_joining
        )
        VALUES (
            :first_name, :last_name, :email, :phone_number, :department, :role, :date_of_joining
        )
        """
    ).bindparams(bindparam("date_of_joining", type_=Date))


USER_QUERIES = UserQueries()
