"""Build segments and composers from configuration."""

from datetime import date, datetime

from composition.composer import Composer
from composition.segments import ConstantSegment, RandomSegment, TimestampSegment
from config import SegmentConfig, load_config
from internal.logging import configure_from


def parse_epoch(epoch):
    """Epoch from config: ISO 8601 string, date, datetime or integer nanoseconds."""
    if isinstance(epoch, str):
        if "T" not in epoch and " " not in epoch:
            return date.fromisoformat(epoch)
        return datetime.fromisoformat(epoch.replace("Z", "+00:00"))
    if epoch is None:
        raise ValueError("timestamp segment needs an epoch")
    return epoch


def build_segment(segment_config, clock=None, source=None):
    if isinstance(segment_config, dict):
        segment_config = SegmentConfig.from_dict(segment_config)

    kind = str(segment_config.kind).lower()
    if kind == "timestamp":
        if segment_config.unit is None:
            raise ValueError("timestamp segment needs a unit")
        return TimestampSegment(segment_config.width, segment_config.unit,
                                parse_epoch(segment_config.epoch), clock=clock)
    if kind == "random":
        return RandomSegment(segment_config.width, source=source)
    if kind == "constant":
        if segment_config.value is None:
            raise ValueError("constant segment needs a value")
        return ConstantSegment(segment_config.width, segment_config.value)
    raise ValueError(f"unknown segment kind {segment_config.kind!r}")


def build_composer(composer_config=None, clock=None, source=None):
    """Composer for ``composer_config``, or for the layout in config.json when omitted.

    The default path also applies the logging level from config.json.
    """
    if composer_config is None:
        config = load_config()
        configure_from(config.logging)
        composer_config = config.composer
    segments = [build_segment(s, clock=clock, source=source) for s in composer_config.segments]
    return Composer(segments, container_width=composer_config.container_width)
