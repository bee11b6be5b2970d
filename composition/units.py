"""Time granularity of timestamp segments."""

from enum import Enum


class TimestampUnit(Enum):
    """Resolution a timestamp segment counts in. Values are nanoseconds per unit."""

    SECONDS = 1_000_000_000
    MILLISECONDS = 1_000_000
    MICROSECONDS = 1_000
    NANOSECONDS = 1

    @property
    def nanos(self):
        return self.value

    def from_nanos(self, nanos):
        """Whole units in a nanosecond duration, truncated toward zero."""
        units = abs(nanos) // self.value
        return -units if nanos < 0 else units

    def to_nanos(self, value):
        return value * self.value

    @classmethod
    def parse(cls, name):
        """Member for a name such as "MILLISECONDS", "milliseconds" or "ms"."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        member = _ALIASES.get(key)
        if member is None:
            raise ValueError(f"unknown timestamp unit {name!r}")
        return member


_ALIASES = {
    "s": TimestampUnit.SECONDS,
    "sec": TimestampUnit.SECONDS,
    "seconds": TimestampUnit.SECONDS,
    "ms": TimestampUnit.MILLISECONDS,
    "milliseconds": TimestampUnit.MILLISECONDS,
    "us": TimestampUnit.MICROSECONDS,
    "microseconds": TimestampUnit.MICROSECONDS,
    "ns": TimestampUnit.NANOSECONDS,
    "nanoseconds": TimestampUnit.NANOSECONDS,
}
