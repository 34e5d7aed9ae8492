"""
Age arithmetic.

Calendar-correct differences between two dates, as people count age:
whole years, then whole months, then remaining days. Naive day-count
division (days / 365.25) is never used because it drifts around month ends
and leap days.

Month-end rule: a day that does not exist in a month (31 April, 29 February
in a common year) rolls over into the following month. So a child born on
29 February 2000 turns 21 on 1 March 2021, and someone born on 31 January
reaches "one month" on 3 March of a common year.
"""
import calendar
from datetime import date, datetime
from typing import Optional, Union

from plainly.app.schemas.dates import AgeResult
from plainly.app.utils.datetime_utils import parse_ISO_date, utctoday
from plainly.app.utils.validation_utils import OutOfRangeError

DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def _previous_month(year: int, month: int) -> tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def anniversary(birth_date: date, year: int) -> date:
    """
    Birthday of `birth_date` in `year`.

    29 February falls on 1 March in common years.
    """
    try:
        return birth_date.replace(year=year)
    except ValueError:
        return date(year, 3, 1)


def next_birthday(birth_date: date, target_date: date) -> date:
    """
    First birthday strictly after `target_date`.

    A birthday falling on the target date itself counts as passed, so the
    next one is a year later.

    Raises:
        OutOfRangeError: If that birthday would fall after year 9999 (date.max)
    """
    candidate = anniversary(birth_date, target_date.year)
    if candidate <= target_date:
        if target_date.year == date.max.year:
            raise OutOfRangeError(
                f"next birthday after {target_date.isoformat()} is beyond year {date.max.year}",
                field="target_date"
                )
        candidate = anniversary(birth_date, target_date.year + 1)
    return candidate


def calendar_difference(start: date, end: date) -> tuple[int, int, int]:
    """
    (years, months, days) from `start` to `end`, with start <= end.

    When the day of month of `end` is before that of `start`, days are
    borrowed from the calendar month preceding `end` using its actual
    length. If that month is too short to absorb the deficit (the month-day
    of `start` overflowed it), one more month is borrowed. A negative month
    count then borrows one year.
    """
    years = end.year - start.year
    months = end.month - start.month
    days = end.day - start.day

    borrow_year, borrow_month = end.year, end.month
    while days < 0:
        borrow_year, borrow_month = _previous_month(borrow_year, borrow_month)
        months -= 1
        days += calendar.monthrange(borrow_year, borrow_month)[1]

    if months < 0:
        years -= 1
        months += MONTHS_PER_YEAR

    return years, months, days


def calculate_age(
    birth_date: Union[date, datetime, str],
    target_date: Optional[Union[date, datetime, str]] = None
    ) -> AgeResult:
    """
    Calculate age at `target_date` and the countdown to the next birthday.

    Args:
        birth_date: date, datetime or ISO string (YYYY-MM-DD)
        target_date: Same types, or None for today (UTC)

    Returns:
        AgeResult

    Raises:
        OutOfRangeError: If birth_date is after target_date, or the next
            birthday would fall after year 9999
        ValueError: If a string is not an ISO date

    Example:
        >>> calculate_age("2000-02-29", "2021-03-01")
        AgeResult(years=21, months=0, days=0, total_days=7671, ...)
    """
    birth = parse_ISO_date(birth_date)
    target = utctoday() if target_date is None else parse_ISO_date(target_date)
    if birth > target:
        raise OutOfRangeError(
            f"birth_date {birth.isoformat()} is after target_date {target.isoformat()}",
            field="birth_date"
            )

    years, months, days = calendar_difference(birth, target)
    total_days = abs((target - birth).days)
    birthday = next_birthday(birth, target)

    return AgeResult(
        years=years,
        months=months,
        days=days,
        total_days=total_days,
        total_weeks=total_days // DAYS_PER_WEEK,
        total_months=years * MONTHS_PER_YEAR + months,
        next_birthday=birthday,
        days_until_birthday=(birthday - target).days,
        )
