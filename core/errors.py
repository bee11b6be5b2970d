"""Custom errors with tracking context."""

from utils.timestamp import format_timestamp


class BaseIdError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        if not self.context:
            return self.message
        details = " ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class SegmentOverflowError(BaseIdError, OverflowError):
    """A value does not fit the bits reserved for it.

    Raised for constants above their width, timestamps too far from the
    epoch, and layouts wider than the container. Retrying will not help:
    widen the segment or move the epoch.
    """

    def __init__(self, message, width=None, value=None, segment=None, **kwargs):
        context = kwargs.pop("context", {})
        if segment:
            context["segment"] = segment
        if width is not None:
            context["width"] = width
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.width = width
        self.value = value
        self.segment = segment
