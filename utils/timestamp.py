"""UTC timestamp utilities."""

import time
from datetime import datetime, timezone


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return int(time.time() * 1_000_000)


def now_seconds():
    """Current time in whole seconds since Unix epoch."""
    return int(time.time())


def to_unix_seconds(value):
    """Whole unix seconds from an int, float or datetime (naive means UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(value)


def from_unix_seconds(seconds):
    """Timezone-aware UTC datetime for unix seconds."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
