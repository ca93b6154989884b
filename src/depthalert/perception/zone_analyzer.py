"""Depth frame analysis — converts raw depth into left/center/right zone statistics."""

from __future__ import annotations

import logging

import numpy as np

from depthalert.bus.messages import (
    DepthFrame, ObstacleSummary, ZoneStats, ZONE_ORDER,
)
from depthalert.perception.geometry import BufferGeometry

logger = logging.getLogger(__name__)


class ZoneAnalyzer:
    """Processes depth frames into per-zone distance statistics.

    Scans the eye-level band of the buffer with a fixed stride on both axes,
    starting at row 0 and at the first column of the band.
    """

    def __init__(
        self,
        stride: int = 4,
        min_valid_depth: float = 0.0,
        max_valid_depth: float = 10.0,
        caution_distance: float = 2.0,
        geometry: BufferGeometry | None = None,
    ) -> None:
        if stride < 1:
            raise ValueError(f"stride must be >= 1, got {stride}")
        self._stride = int(stride)
        self._min_depth = min_valid_depth
        self._max_depth = max_valid_depth
        self._caution = caution_distance
        self._geometry = geometry or BufferGeometry()

    def analyze(self, frame: DepthFrame) -> ObstacleSummary:
        """Analyze a depth frame and return zone statistics plus the farthest point.

        Raises FrameShapeError for malformed frames.
        """
        grid = frame.as_grid()
        h, w = grid.shape
        geo = self._geometry

        col_start, col_end = geo.vertical_band(w)
        rows = np.arange(0, h, self._stride)
        cols = np.arange(col_start, col_end, self._stride)
        window = grid[0:h:self._stride, col_start:col_end:self._stride]

        # NaN compares False on both sides, so it drops out here too
        valid = (window > self._min_depth) & (window < self._max_depth)

        zones = {}
        for zone, row_mask in geo.zone_masks(rows, h).items():
            values = window[valid & row_mask[:, np.newaxis]]
            zones[zone] = self._zone_stats(values)

        nearest_zone = min(ZONE_ORDER, key=lambda z: zones[z].min_distance)
        nearest_distance = zones[nearest_zone].min_distance

        # Farthest point in scan order (column-outer, row-inner), first max wins
        far_col, far_row = w // 2, h // 2
        farthest = 0.0
        if valid.any():
            scan = np.where(valid, window, -np.inf).T
            col_i, row_i = divmod(int(np.argmax(scan)), scan.shape[1])
            far_col, far_row = int(cols[col_i]), int(rows[row_i])
            farthest = float(scan[col_i, row_i])

        summary = ObstacleSummary(
            zones=zones,
            nearest_distance=nearest_distance,
            nearest_zone=nearest_zone,
            farthest_point=geo.map_to_screen_point(far_col, far_row, w, h),
            farthest_distance=farthest,
            timestamp=frame.timestamp,
        )

        logger.debug(
            "Buffer %dx%d, samples=%d | L=%.2fm C=%.2fm R=%.2fm | farthest=%.2fm at (%d, %d)",
            w, h, int(np.count_nonzero(valid)),
            summary.left.min_distance, summary.center.min_distance, summary.right.min_distance,
            farthest, far_col, far_row,
        )
        return summary

    def _zone_stats(self, values: np.ndarray) -> ZoneStats:
        """Compute min/avg/presence over the valid samples of one zone."""
        if values.size == 0:
            return ZoneStats()
        close = int(np.count_nonzero(values < self._caution))
        return ZoneStats(
            min_distance=float(values.min()),
            avg_distance=float(values.mean(dtype=np.float64)),
            obstacle_presence=close / values.size,
        )
