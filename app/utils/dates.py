from datetime import datetime, timezone
from typing import Any, Optional

# 9999-12-31 23:59:59 UTC, the last second datetime can represent
MAX_TIMESTAMP = 253402300799


def utcnow() -> datetime:
    """Naive UTC now, matching how DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def from_timestamp(value: int) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc).replace(tzinfo=None)


def to_timestamp(value: Optional[datetime]) -> Optional[int]:
    if value is None:
        return None
    return int(value.replace(tzinfo=timezone.utc).timestamp())


def as_timestamp(value: Any) -> Optional[int]:
    """Best effort int conversion for raw payload values; None when not a number."""
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_short_time(value: datetime) -> str:
    """'09:30am' style used in seller notifications."""
    return value.strftime("%I:%M%p").lower()


def format_long_date(value: datetime) -> str:
    """'Monday, 1st January' style used in seller notifications."""
    return f"{value.strftime('%A')}, {_ordinal(value.day)} {value.strftime('%B')}"
