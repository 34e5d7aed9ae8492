"""
Test datetime utilities.
All test is independent of the others, so help use pytest features.
"""
from datetime import date, datetime, timezone

import pytest

from plainly.app.utils.datetime_utils import parse_ISO_date, utcnow, utctoday


# ============================================================================
# TESTS: utcnow / utctoday
# ============================================================================

def test_utcnow_has_timezone_info():
    """Test that utcnow() returns timezone-aware datetime."""
    result = utcnow()
    assert isinstance(result, datetime)
    assert result.tzinfo == timezone.utc


def test_utcnow_returns_current_time():
    """Test that utcnow() returns approximately current time."""
    before = datetime.now(timezone.utc)
    result = utcnow()
    after = datetime.now(timezone.utc)
    assert before <= result <= after


def test_utctoday_is_a_plain_date():
    """utctoday() is a date, not a datetime."""
    result = utctoday()
    assert type(result) is date
    assert result == datetime.now(timezone.utc).date() or result == utcnow().date()


# ============================================================================
# TESTS: parse_ISO_date
# ============================================================================

def test_parse_iso_string():
    assert parse_ISO_date("2000-02-29") == date(2000, 2, 29)


def test_parse_strips_whitespace():
    assert parse_ISO_date(" 2021-03-01\n") == date(2021, 3, 1)


def test_parse_date_passthrough():
    value = date(1990, 1, 15)
    assert parse_ISO_date(value) is value


def test_parse_datetime_drops_time():
    """A datetime is a date subclass, but the result must be a plain date."""
    result = parse_ISO_date(datetime(2024, 5, 6, 23, 59, tzinfo=timezone.utc))
    assert result == date(2024, 5, 6)
    assert type(result) is date


@pytest.mark.parametrize("value", ["2021-02-30", "15/01/1990", "yesterday", ""])
def test_parse_invalid_string(value):
    with pytest.raises(ValueError):
        parse_ISO_date(value)


def test_parse_unsupported_type():
    with pytest.raises(TypeError):
        parse_ISO_date(20000229)
