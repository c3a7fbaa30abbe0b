"""Birthday calculation package."""

from deeday.birthdays.calculator import (
    age_turning,
    birthday_in_year,
    calculate_birthday_info,
    days_until_birthday,
)

__all__ = [
    "age_turning",
    "birthday_in_year",
    "calculate_birthday_info",
    "days_until_birthday",
]
