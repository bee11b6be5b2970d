"""Nanosecond timestamp utilities and clock providers."""

import time
from datetime import date, datetime, timedelta, timezone

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
NANOS_PER_MICRO = 1_000


def now_nanos():
    """Current time in nanoseconds since Unix epoch."""
    return time.time_ns()


def now_micros():
    """Current time in microseconds since Unix epoch."""
    return time.time_ns() // NANOS_PER_MICRO


def to_nanos(instant):
    """Convert a datetime, date or integer nanoseconds to nanoseconds since Unix epoch.

    Naive datetimes are taken as UTC. A date means midnight UTC of that day.
    """
    if isinstance(instant, bool):
        raise TypeError("instant must be a datetime, date or int")
    if isinstance(instant, int):
        return instant
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        delta = instant - UNIX_EPOCH
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        return micros * NANOS_PER_MICRO
    if isinstance(instant, date):
        return to_nanos(datetime(instant.year, instant.month, instant.day, tzinfo=timezone.utc))
    raise TypeError(f"instant must be a datetime, date or int, not {type(instant).__name__}")


def from_nanos(nanos):
    """Aware UTC datetime for nanoseconds since Unix epoch, truncated to microseconds.

    Raises OverflowError when the instant is outside the datetime range.
    """
    # floor division keeps pre-1970 instants on the earlier microsecond
    return UNIX_EPOCH + timedelta(microseconds=nanos // NANOS_PER_MICRO)


def format_timestamp(epoch_us=None):
    """Format timestamp as ISO 8601 with microseconds."""
    if epoch_us is None:
        epoch_us = now_micros()

    dt = UNIX_EPOCH + timedelta(microseconds=epoch_us)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f") + "Z"


class SystemClock:
    """Wall clock backed by time.time_ns(). Safe to share between threads."""

    def now_nanos(self):
        return now_nanos()

    def __repr__(self):
        return "SystemClock()"


class FixedClock:
    """Clock frozen at a single instant."""

    __slots__ = ("nanos",)

    def __init__(self, instant):
        self.nanos = to_nanos(instant)

    def now_nanos(self):
        return self.nanos

    def __repr__(self):
        return f"FixedClock({self.nanos})"


SYSTEM_CLOCK = SystemClock()
