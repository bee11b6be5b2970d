"""Packs segments into one integer and unpacks it again."""

from composition.segments import Segment
from core.errors import SegmentOverflowError
from internal.logging import LogLevel, get_logger

CONTAINER_WIDTH = 128


class Composer:
    """An identifier layout: segments ordered most-significant first.

    Bit positions follow from the widths alone, so the last segment sits in
    the lowest bits and each earlier one is shifted past everything after it.
    """

    __slots__ = ("_segments", "_offsets", "_width", "_container_width")

    def __init__(self, segments, container_width=CONTAINER_WIDTH):
        segments = tuple(segments)
        if not segments:
            raise ValueError("a composer needs at least one segment")
        for segment in segments:
            if not isinstance(segment, Segment):
                raise TypeError(f"expected a Segment, got {type(segment).__name__}")

        width = sum(segment.width for segment in segments)
        if width > container_width:
            raise SegmentOverflowError(f"segments need {width} bits, container holds {container_width}",
                                       width=container_width, value=width)

        offsets = []
        offset = 0
        for segment in reversed(segments):
            offsets.append(offset)
            offset += segment.width
        offsets.reverse()

        self._segments = segments
        self._offsets = tuple(offsets)
        self._width = width
        self._container_width = container_width
        log = get_logger()
        if log.level <= LogLevel.DEBUG:
            log.debug("composer layout", width=width,
                      segments=[segment.to_dict() for segment in segments])

    @property
    def segments(self):
        return self._segments

    @property
    def offsets(self):
        """Shift offset of each segment, in layout order."""
        return self._offsets

    @property
    def width(self):
        return self._width

    @property
    def container_width(self):
        return self._container_width

    def __len__(self):
        return len(self._segments)

    def __iter__(self):
        return iter(self._segments)

    def __repr__(self):
        return f"Composer({list(self._segments)!r}, container_width={self._container_width})"

    def generate(self):
        """Encode every segment and pack the results into a fresh identifier.

        The first failing segment aborts generation; nothing is returned.
        """
        result = 0
        offset = 0
        for segment in reversed(self._segments):
            try:
                raw = segment.check(segment.encode())
            except SegmentOverflowError as exc:
                get_logger().warn("identifier generation failed", error=exc, segment=segment.kind,
                                 offset=offset)
                raise
            result |= raw << offset
            offset += segment.width
        return result

    def compose(self, raw_values):
        """Pack already-encoded raw values, one per segment in layout order."""
        raw_values = tuple(raw_values)
        if len(raw_values) != len(self._segments):
            raise ValueError(f"expected {len(self._segments)} values, got {len(raw_values)}")
        result = 0
        for segment, raw, offset in zip(self._segments, raw_values, self._offsets):
            result |= segment.check(raw) << offset
        return result

    def decompose_raw(self, value):
        """Raw per-segment integers of ``value``, in layout order."""
        if value < 0 or value.bit_length() > self._width:
            raise SegmentOverflowError(f"identifier does not fit the {self._width}-bit layout",
                                       width=self._width, value=value)
        raws = []
        for segment in reversed(self._segments):
            raws.append(value & segment.max_raw)
            value >>= segment.width
        raws.reverse()
        return tuple(raws)

    def decompose(self, value):
        """Decoded per-segment values of ``value``, in layout order."""
        return tuple(segment.decode(raw) for segment, raw in zip(self._segments, self.decompose_raw(value)))
