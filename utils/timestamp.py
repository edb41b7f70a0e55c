"""UTC timestamp helpers."""

import time
from datetime import datetime, timezone


def unix_seconds(clock=None):
    """Whole seconds since the Unix epoch, from clock or time.time."""
    return int((clock or time.time)())


def from_unix(seconds):
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def format_timestamp(seconds=None):
    """ISO 8601 UTC timestamp with milliseconds, e.g. 2024-05-01T12:00:00.123Z."""
    if seconds is None:
        seconds = time.time()
    return from_unix(seconds).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
