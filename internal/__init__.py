from internal.logging import LogLevel, StructuredLogger, configure_from, get_logger

__all__ = [
    "LogLevel",
    "StructuredLogger",
    "configure_from",
    "get_logger",
]
