from composition.composer import CONTAINER_WIDTH, Composer
from composition.segments import (
    MAX_WIDTH,
    ConstantSegment,
    RandomSegment,
    Segment,
    TimestampSegment,
    upper_bound_for_width,
)
from composition.units import TimestampUnit

__all__ = [
    "CONTAINER_WIDTH",
    "MAX_WIDTH",
    "Composer",
    "ConstantSegment",
    "RandomSegment",
    "Segment",
    "TimestampSegment",
    "TimestampUnit",
    "upper_bound_for_width",
]
