"""Message dataclasses, enums and topic constants."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from depthalert.errors import FrameShapeError

# Topic constants
TOPIC_OBSTACLE_SUMMARY = "perception/obstacle_summary"
TOPIC_FLOOR_CHANGE = "perception/floor_change"
TOPIC_ALERT_DISPATCH = "alerts/dispatch"

INF = float("inf")


class Zone(enum.Enum):
    """Horizontal screen region, as seen by a user holding the phone in portrait."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def phrase(self) -> str:
        return _ZONE_PHRASES[self]


_ZONE_PHRASES = {
    Zone.LEFT: "on your left",
    Zone.CENTER: "ahead",
    Zone.RIGHT: "on your right",
}

# Fixed order used for nearest-zone tie-breaks
ZONE_ORDER = (Zone.LEFT, Zone.CENTER, Zone.RIGHT)


class HapticPattern(enum.Enum):
    TAP = "tap"
    DOUBLE_TAP = "double_tap"
    SUCCESS = "success"
    WARNING = "warning"
    CRITICAL = "critical"
    MODE_SWITCH = "mode_switch"
    NAVIGATION = "navigation"


class AlertLevel(enum.IntEnum):
    """Obstacle severity, ordered from safest to most urgent."""
    SAFE = 0
    CAUTION = 1
    WARNING = 2
    CRITICAL = 3

    @property
    def haptic_pattern(self) -> HapticPattern:
        if self == AlertLevel.CRITICAL:
            return HapticPattern.CRITICAL
        if self == AlertLevel.WARNING:
            return HapticPattern.WARNING
        return HapticPattern.TAP


class AnnouncementChannel(enum.Enum):
    HAPTIC = "haptic"
    SPEECH = "speech"


class FloorChangeKind(enum.Enum):
    STEP_UP = "step_up"
    STEP_DOWN = "step_down"
    SLOPE = "slope"


@dataclass(frozen=True, eq=False)
class DepthFrame:
    """A single depth frame from the sensor.

    `samples` is a flat row-major buffer of width*height distances in meters:
    the sample at (column, row) lives at index row * width + column.
    """
    width: int
    height: int
    samples: Any                        # flat float32 buffer (np.ndarray or sequence)
    timestamp: float = field(default_factory=time.monotonic)
    frame_id: int = 0

    def as_grid(self) -> np.ndarray:
        """Return the samples as a read-only (height, width) float32 view.

        Raises FrameShapeError for zero dimensions or a buffer length mismatch.
        """
        flat = np.asarray(self.samples, dtype=np.float32).reshape(-1)
        if self.width <= 0 or self.height <= 0 or flat.size != self.width * self.height:
            raise FrameShapeError(self.width, self.height, flat.size)
        grid = flat.reshape(self.height, self.width)
        grid.flags.writeable = False
        return grid


@dataclass(frozen=True)
class ZoneStats:
    """Aggregate distances for one zone. Infinite distances mean no valid sample."""
    min_distance: float = INF
    avg_distance: float = INF
    obstacle_presence: float = 0.0     # fraction of valid samples closer than caution distance


@dataclass(frozen=True)
class ObstacleSummary:
    """Per-frame obstacle picture. Rebuilt from scratch for every frame."""
    zones: dict[Zone, ZoneStats]
    nearest_distance: float = INF
    nearest_zone: Zone = Zone.LEFT
    farthest_point: tuple[float, float] = (0.5, 0.5)   # normalized screen (x, y)
    farthest_distance: float = 0.0
    timestamp: float = 0.0

    @classmethod
    def empty(cls) -> ObstacleSummary:
        return cls(zones={zone: ZoneStats() for zone in ZONE_ORDER})

    @property
    def left(self) -> ZoneStats:
        return self.zones[Zone.LEFT]

    @property
    def center(self) -> ZoneStats:
        return self.zones[Zone.CENTER]

    @property
    def right(self) -> ZoneStats:
        return self.zones[Zone.RIGHT]


@dataclass(frozen=True)
class FloorChangeEvent:
    """A step or drop detected in the floor band at the bottom of the frame."""
    kind: FloorChangeKind
    estimated_height_m: float
    confidence: float

    @property
    def description(self) -> str:
        if self.kind == FloorChangeKind.STEP_UP:
            return "Step up detected ahead"
        if self.kind == FloorChangeKind.STEP_DOWN:
            return "Step down or drop detected ahead"
        return "Slope detected ahead"
