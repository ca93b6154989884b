"""Hardware factory functions."""

from omegaconf import DictConfig

from depthalert.hardware.base import Announcer, DepthSource, Haptics


def create_source(cfg: DictConfig) -> DepthSource:
    """Create a depth source based on config."""
    source_type = cfg.source.type
    if source_type == "realsense":
        from depthalert.hardware.realsense import RealSenseDepthSource
        return RealSenseDepthSource(cfg.source)
    elif source_type == "mock":
        from depthalert.hardware.mock import MockDepthSource
        return MockDepthSource(cfg.source)
    else:
        raise ValueError(f"Unknown depth source type: {source_type}")


def create_announcer(cfg: DictConfig) -> Announcer:
    """Create a speech announcer based on config."""
    announcer_type = cfg.announcer.type
    if announcer_type == "pyttsx3":
        from depthalert.hardware.tts import Pyttsx3Announcer
        return Pyttsx3Announcer(cfg.announcer)
    elif announcer_type == "mock":
        from depthalert.hardware.mock import MockAnnouncer
        return MockAnnouncer(cfg.announcer)
    else:
        raise ValueError(f"Unknown announcer type: {announcer_type}")


def create_haptics(cfg: DictConfig) -> Haptics:
    """Create a haptics backend based on config."""
    haptics_type = cfg.haptics.type
    if haptics_type == "http":
        from depthalert.hardware.http_haptics import HttpHaptics
        return HttpHaptics(cfg.haptics)
    elif haptics_type == "mock":
        from depthalert.hardware.mock import MockHaptics
        return MockHaptics(cfg.haptics)
    else:
        raise ValueError(f"Unknown haptics type: {haptics_type}")
