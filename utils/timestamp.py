"""Wall-clock helpers shared by logs, snapshots and crash records."""

import time
from datetime import datetime, timezone


def now_micros():
    """Microseconds since the Unix epoch."""
    return int(time.time() * 1_000_000)


def elapsed_ms(since_us, until_us=None):
    """Milliseconds between two now_micros() readings, rounded to 0.1ms."""
    if until_us is None:
        until_us = now_micros()
    return round((until_us - since_us) / 1000, 1)


def format_timestamp(epoch_us=None):
    """ISO 8601, UTC, microsecond precision, 'Z' suffix."""
    if epoch_us is None:
        epoch_us = now_micros()
    moment = datetime.fromtimestamp(epoch_us / 1_000_000, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"
