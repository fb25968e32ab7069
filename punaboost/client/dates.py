"""
Expiration-date helpers for job postings.

Day counts compare calendar dates only; the time of day is ignored.
"""
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[str, date, datetime, None]

DESTRUCTIVE = "destructive"
DEFAULT = "default"
SECONDARY = "secondary"


def _to_date(value: DateLike) -> Optional[date]:
    if not value:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    return value


def get_days_until_expiration(expires_at: DateLike, today: Optional[date] = None) -> Optional[int]:
    """Days from today until expires_at: negative once expired, 0 on the day itself, None without a date."""
    expires_on = _to_date(expires_at)
    if expires_on is None:
        return None
    today = today or date.today()
    return (expires_on - today).days


def format_expiration_date(expires_at: DateLike) -> str:
    """Long US-style date, e.g. "March 7, 2025"; empty string without a date."""
    expires_on = _to_date(expires_at)
    if expires_on is None:
        return ""
    return f"{expires_on:%B} {expires_on.day}, {expires_on.year}"


def get_expiration_badge_info(days_left: Optional[int]) -> Optional[dict]:
    if days_left is None:
        return None

    if days_left < 0:
        return {"variant": DESTRUCTIVE, "label": "Expired"}
    if days_left == 0:
        return {"variant": DESTRUCTIVE, "label": "Expires today"}
    if days_left == 1:
        return {"variant": DESTRUCTIVE, "label": "1 day left"}
    if days_left <= 3:
        return {"variant": DESTRUCTIVE, "label": f"{days_left} days left"}
    if days_left <= 7:
        return {"variant": DEFAULT, "label": f"{days_left} days left"}
    return {"variant": SECONDARY, "label": f"{days_left} days left"}
