"""Frame builders and a controllable clock shared by the tests."""

import numpy as np

from depthalert.bus.messages import DepthFrame


def make_frame(grid, timestamp: float = 0.0, frame_id: int = 0) -> DepthFrame:
    """Build a DepthFrame from a (height, width) grid indexed [row, column]."""
    grid = np.asarray(grid, dtype=np.float32)
    h, w = grid.shape
    return DepthFrame(width=w, height=h, samples=grid.reshape(-1),
                      timestamp=timestamp, frame_id=frame_id)


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
