"""Timezone utilities; all stored timestamps are UTC."""

from datetime import datetime

import pytz

UTC = pytz.UTC


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC; naive datetimes are assumed to be UTC already."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def from_timestamp_ms(value: float) -> datetime:
    """Convert a millisecond epoch timestamp (CoinGecko charts) to UTC."""
    return datetime.fromtimestamp(value / 1000, UTC)
