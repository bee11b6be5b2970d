import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SegmentConfig:
    __slots__ = ("kind", "width", "unit", "epoch", "value")

    def __init__(self, kind, width, unit=None, epoch=None, value=None):
        self.kind = kind
        self.width = width
        self.unit = unit
        self.epoch = epoch
        self.value = value

    @classmethod
    def from_dict(cls, d):
        return cls(**d)


class ComposerConfig:
    __slots__ = ("container_width", "segments")

    def __init__(self, container_width=128, segments=None):
        self.container_width = container_width
        self.segments = [s if isinstance(s, SegmentConfig) else SegmentConfig.from_dict(s)
                         for s in segments or []]


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("composer", "logging")

    def __init__(self, composer=None, logging=None):
        self.composer = composer or ComposerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            ComposerConfig(**d.get("composer", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
