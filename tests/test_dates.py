from datetime import date, datetime

import pytest

from punaboost.client.dates import (
    format_expiration_date,
    get_days_until_expiration,
    get_expiration_badge_info,
)

TODAY = date(2025, 6, 15)


def test_same_day_is_zero_regardless_of_time():
    assert get_days_until_expiration(datetime(2025, 6, 15, 23, 59), today=TODAY) == 0
    assert get_days_until_expiration("2025-06-15T00:00:00", today=TODAY) == 0


def test_past_and_future_dates():
    assert get_days_until_expiration("2025-06-10", today=TODAY) == -5
    assert get_days_until_expiration(date(2025, 7, 15), today=TODAY) == 30


def test_missing_date_returns_none():
    assert get_days_until_expiration(None, today=TODAY) is None
    assert get_days_until_expiration("", today=TODAY) is None


def test_defaults_to_current_date():
    assert get_days_until_expiration(date.today()) == 0


@pytest.mark.parametrize("days_left, variant, label", [
    (-1, "destructive", "Expired"),
    (0, "destructive", "Expires today"),
    (1, "destructive", "1 day left"),
    (3, "destructive", "3 days left"),
    (5, "default", "5 days left"),
    (7, "default", "7 days left"),
    (8, "secondary", "8 days left"),
    (30, "secondary", "30 days left"),
])
def test_badge_info(days_left, variant, label):
    assert get_expiration_badge_info(days_left) == {"variant": variant, "label": label}


def test_badge_info_without_days():
    assert get_expiration_badge_info(None) is None


def test_format_expiration_date():
    assert format_expiration_date("2025-03-07T10:00:00") == "March 7, 2025"
    assert format_expiration_date(date(2024, 12, 25)) == "December 25, 2024"
    assert format_expiration_date(None) == ""
