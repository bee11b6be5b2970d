"""Bit-field segments an identifier is composed of.

A segment owns a fixed number of bits and knows how to produce a raw value
for them (``encode``) and how to turn a raw value back into something
meaningful (``decode``). Segments hold configuration only, so a single
instance can be shared by any number of composers and threads.
"""

from composition.units import TimestampUnit
from core.errors import SegmentOverflowError
from utils.rng import SYSTEM_RANDOM
from utils.timestamp import SYSTEM_CLOCK, from_nanos, to_nanos

MAX_WIDTH = 128


def upper_bound_for_width(width):
    """Largest unsigned integer representable in ``width`` bits."""
    return (1 << width) - 1


class Segment:
    """Common behaviour of all segment kinds."""

    __slots__ = ("width",)
    kind = None

    def __init__(self, width):
        if isinstance(width, bool) or not isinstance(width, int):
            raise TypeError(f"segment width must be an int, not {type(width).__name__}")
        if not 1 <= width <= MAX_WIDTH:
            raise ValueError(f"segment width must be in [1, {MAX_WIDTH}], got {width}")
        self.width = width

    @property
    def max_raw(self):
        return upper_bound_for_width(self.width)

    @property
    def upper_bound(self):
        return self.max_raw

    def fits(self, raw):
        return 0 <= raw <= self.max_raw

    def check(self, raw):
        """Return ``raw`` if it fits this segment's width, raise otherwise."""
        if not self.fits(raw):
            raise SegmentOverflowError(f"value does not fit in {self.width} bits",
                                       width=self.width, value=raw, segment=self.kind)
        return raw

    def encode(self):
        raise NotImplementedError

    def decode(self, raw):
        return raw

    def to_dict(self):
        return {"kind": self.kind, "width": self.width}

    def __repr__(self):
        return f"{type(self).__name__}(width={self.width})"


class TimestampSegment(Segment):
    """Time elapsed since ``epoch``, counted in ``unit``."""

    __slots__ = ("unit", "epoch_nanos", "clock")
    kind = "timestamp"

    def __init__(self, width, unit, epoch, clock=None):
        super().__init__(width)
        self.unit = TimestampUnit.parse(unit)
        self.epoch_nanos = to_nanos(epoch)
        self.clock = clock or SYSTEM_CLOCK

    @property
    def epoch(self):
        return from_nanos(self.epoch_nanos)

    @property
    def upper_bound_nanos(self):
        return self.epoch_nanos + self.unit.to_nanos(self.max_raw)

    @property
    def upper_bound(self):
        """Latest instant this segment can encode."""
        return self._to_datetime(self.upper_bound_nanos, self.max_raw)

    def encode(self):
        elapsed = self.clock.now_nanos() - self.epoch_nanos
        raw = self.unit.from_nanos(elapsed)
        if raw < 0:
            raise SegmentOverflowError("clock reads earlier than the segment epoch",
                                       width=self.width, value=raw, segment=self.kind)
        if raw > self.max_raw:
            raise SegmentOverflowError(f"time since epoch does not fit in {self.width} bits",
                                       width=self.width, value=raw, segment=self.kind)
        return raw

    def decode_nanos(self, raw):
        """Instant for ``raw`` as nanoseconds since the Unix epoch."""
        return self.epoch_nanos + self.unit.to_nanos(raw)

    def decode(self, raw):
        return self._to_datetime(self.decode_nanos(raw), raw)

    def _to_datetime(self, nanos, raw):
        try:
            return from_nanos(nanos)
        except OverflowError as exc:
            raise SegmentOverflowError("instant is outside the datetime range",
                                       width=self.width, value=raw, segment=self.kind,
                                       cause=exc) from exc

    def to_dict(self):
        try:
            epoch = self.epoch.isoformat()
        except OverflowError:
            # past datetime range, keep integer nanoseconds
            epoch = self.epoch_nanos
        return {"kind": self.kind, "width": self.width, "unit": self.unit.name.lower(), "epoch": epoch}

    def __repr__(self):
        return f"TimestampSegment(width={self.width}, unit={self.unit.name}, epoch_nanos={self.epoch_nanos})"


class RandomSegment(Segment):
    """Uniformly random bits, drawn fresh on every encode."""

    __slots__ = ("source",)
    kind = "random"

    def __init__(self, width, source=None):
        super().__init__(width)
        self.source = source or SYSTEM_RANDOM

    def encode(self):
        return self.source.uniform(0, self.max_raw)


class ConstantSegment(Segment):
    """A fixed value such as a node or shard id."""

    __slots__ = ("value",)
    kind = "constant"

    def __init__(self, width, value):
        super().__init__(width)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"constant value must be an int, not {type(value).__name__}")
        self.value = value
        self.check(value)

    def encode(self):
        return self.check(self.value)

    def to_dict(self):
        return {"kind": self.kind, "width": self.width, "value": self.value}

    def __repr__(self):
        return f"ConstantSegment(width={self.width}, value={self.value})"
