"""Mock depth source and feedback collaborators for desktop development and testing."""

from __future__ import annotations

import logging

import numpy as np
from omegaconf import DictConfig

from depthalert.bus.messages import DepthFrame, HapticPattern
from depthalert.hardware.base import Announcer, DepthSource, Haptics

logger = logging.getLogger(__name__)


class MockDepthSource(DepthSource):
    """Generates synthetic portrait-rotated depth frames without a sensor.

    3m everywhere, with a wall straight ahead that approaches over time and
    resets every 100 frames.
    """

    def __init__(self, cfg: DictConfig) -> None:
        self._width = cfg.get("width", 256)
        self._height = cfg.get("height", 192)
        self._background = cfg.get("background_depth", 3.0)
        self._frame_id = 0

    def start(self) -> None:
        logger.info("MockDepthSource started (%dx%d)", self._width, self._height)

    def read(self) -> DepthFrame:
        self._frame_id += 1
        depth = np.full((self._height, self._width), self._background, dtype=np.float32)

        # Screen-centre rows, eye-level columns
        wall_dist = max(0.3, self._background - (self._frame_id % 100) * 0.03)
        rows = slice(self._height // 2 - self._height // 6, self._height // 2 + self._height // 6)
        cols = slice(self._width // 4, 3 * self._width // 4)
        depth[rows, cols] = wall_dist

        return DepthFrame(
            width=self._width,
            height=self._height,
            samples=depth.reshape(-1),
            frame_id=self._frame_id,
        )

    def stop(self) -> None:
        logger.info("MockDepthSource stopped")


class MockAnnouncer(Announcer):
    """Logs speech instead of speaking. Stores history for tests."""

    def __init__(self, cfg: DictConfig | None = None) -> None:
        self.spoken: list[str] = []

    def speak_now(self, text: str) -> None:
        self.spoken.append(text)
        logger.debug("MockAnnouncer: %s", text)


class MockHaptics(Haptics):
    """Logs haptic patterns instead of vibrating. Stores history for tests."""

    def __init__(self, cfg: DictConfig | None = None) -> None:
        self.played: list[HapticPattern] = []

    def play(self, pattern: HapticPattern) -> None:
        self.played.append(pattern)
        logger.debug("MockHaptics: %s", pattern.value)
