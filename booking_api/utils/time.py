"""Time helpers. Bookings are stored and compared as naive UTC."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current UTC time without tzinfo, comparable with stored booking times."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
