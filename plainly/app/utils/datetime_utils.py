"""
Clock and calendar-date helpers.

The date calculators work on plain calendar dates: an omitted target date
means "today in UTC", and every input date arrives as an ISO string or a
date object.
"""
from datetime import datetime, timezone, date


def utcnow() -> datetime:
    """Timezone-aware current time (UTC). Use instead of the naive datetime.now()."""
    return datetime.now(timezone.utc)


def utctoday() -> date:
    """Today's calendar date in UTC, the default target date of the age calculator."""
    return utcnow().date()


def parse_ISO_date(v) -> date:
    """
    Coerce a calculator date input to a date.

    Accepts "YYYY-MM-DD" (surrounding blanks ignored), a date, or a datetime
    (its time of day is dropped).

    Raises:
        ValueError: the string is not an ISO calendar date (e.g. "2021-02-29")
        TypeError: any other input type
    """
    # datetime subclasses date
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        try:
            return date.fromisoformat(v.strip())
        except ValueError as e:
            raise ValueError(f"'{v}' is not an ISO calendar date (YYYY-MM-DD): {e}")
    raise TypeError(f"Date input must be a str, date or datetime, got {type(v).__name__}")
