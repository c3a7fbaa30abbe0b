"""
Birthday Calculator

Pure functions: given a birthdate and today's date, work out how many
days remain until the next birthday and the age that will be reached.

DESIGN DECISION: Everything here is datetime.date arithmetic.
No timestamps, no timezones, no time of day. Subtracting two dates
always yields a whole number of days, so there is nothing to round.

Age is calendar-year arithmetic (candidate year - birth year): the age
the person is TURNING, not their current age.
"""

import calendar
from datetime import date
from typing import Optional

from deeday.models.member import BirthdayInfo, LeapDayPolicy


def birthday_in_year(
    birthdate: date,
    year: int,
    leap_day_policy: LeapDayPolicy = LeapDayPolicy.FEB_28,
) -> date:
    """
    The anniversary of birthdate in the given year.

    Feb 29 birthdays in a non-leap year resolve to Feb 28 or Mar 1
    depending on leap_day_policy.
    """
    if birthdate.month == 2 and birthdate.day == 29 and not calendar.isleap(year):
        if leap_day_policy == LeapDayPolicy.MAR_1:
            return date(year, 3, 1)
        return date(year, 2, 28)
    return birthdate.replace(year=year)


def calculate_birthday_info(
    birthdate: date,
    today: Optional[date] = None,
    leap_day_policy: LeapDayPolicy = LeapDayPolicy.FEB_28,
) -> BirthdayInfo:
    """
    Compute days until the next birthday and the age being turned.

    Args:
        birthdate: The member's date of birth
        today: Reference date (defaults to the local date)
        leap_day_policy: Resolution for Feb 29 in non-leap years

    Returns:
        BirthdayInfo with days_until == 0 when the birthday is today
    """
    today = today or date.today()
    candidate = birthday_in_year(birthdate, today.year, leap_day_policy)

    # Exact match is checked on month/day before any subtraction
    if (candidate.month, candidate.day) == (today.month, today.day):
        age = today.year - birthdate.year
        return BirthdayInfo(
            days_until=0,
            age_turning=age,
            next_birthday=candidate,
            message=f"🎉 Happy Birthday! Turning {age} today!",
        )

    if candidate < today:
        candidate = birthday_in_year(birthdate, today.year + 1, leap_day_policy)

    days_until = (candidate - today).days
    age = candidate.year - birthdate.year

    return BirthdayInfo(
        days_until=days_until,
        age_turning=age,
        next_birthday=candidate,
        message=f"{days_until} day(s) away – turning {age}",
    )


def days_until_birthday(
    birthdate: date,
    today: Optional[date] = None,
    leap_day_policy: LeapDayPolicy = LeapDayPolicy.FEB_28,
) -> int:
    """Days until the next birthday, 0 if it is today."""
    return calculate_birthday_info(birthdate, today, leap_day_policy).days_until


def age_turning(
    birthdate: date,
    today: Optional[date] = None,
    leap_day_policy: LeapDayPolicy = LeapDayPolicy.FEB_28,
) -> int:
    """Age reached on the next (or today's) birthday."""
    return calculate_birthday_info(birthdate, today, leap_day_policy).age_turning
