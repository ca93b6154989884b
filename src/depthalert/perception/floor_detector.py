"""Floor level change detection (steps, curbs, drops)."""

from __future__ import annotations

import logging

import numpy as np

from depthalert.bus.messages import DepthFrame, FloorChangeEvent, FloorChangeKind
from depthalert.perception.geometry import BufferGeometry

logger = logging.getLogger(__name__)


class FloorChangeDetector:
    """Looks for depth discontinuities in the floor band at the bottom of the screen.

    Collects valid depths from the floor window, takes their median, and counts
    samples noticeably closer (step up) or farther (step down) than it. Step up
    is checked first and wins when both exceed the quarter threshold.
    """

    def __init__(
        self,
        column_stride: int = 4,
        row_stride: int = 2,
        min_valid_depth: float = 0.1,
        max_valid_depth: float = 5.0,
        min_samples: int = 11,
        step_threshold: float = 0.15,
        estimated_height: float = 0.15,
        geometry: BufferGeometry | None = None,
    ) -> None:
        if column_stride < 1 or row_stride < 1:
            raise ValueError("floor strides must be >= 1")
        self._column_stride = int(column_stride)
        self._row_stride = int(row_stride)
        self._min_depth = min_valid_depth
        self._max_depth = max_valid_depth
        self._min_samples = min_samples
        self._step = step_threshold
        self._height = estimated_height
        self._geometry = geometry or BufferGeometry()

    def detect(self, frame: DepthFrame) -> FloorChangeEvent | None:
        """Return a floor change event, or None if the band looks flat or too sparse.

        Raises FrameShapeError for malformed frames.
        """
        grid = frame.as_grid()
        h, w = grid.shape
        rows, cols = self._geometry.floor_window(w, h)
        band = grid[
            rows.start:rows.stop:self._row_stride,
            cols.start:cols.stop:self._column_stride,
        ]
        depths = band[(band > self._min_depth) & (band < self._max_depth)]

        total = int(depths.size)
        if total < self._min_samples:
            return None

        median = float(np.sort(depths)[total // 2])
        close_count = int(np.count_nonzero(depths < median - self._step))
        far_count = int(np.count_nonzero(depths > median + self._step))

        if close_count > total // 4:
            event = FloorChangeEvent(FloorChangeKind.STEP_UP, self._height, close_count / total)
        elif far_count > total // 4:
            event = FloorChangeEvent(FloorChangeKind.STEP_DOWN, self._height, far_count / total)
        else:
            return None

        logger.debug("Floor change: %s (median=%.2fm, confidence=%.2f, n=%d)",
                     event.kind.value, median, event.confidence, total)
        return event
