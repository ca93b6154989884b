"""Buffer-to-screen geometry for a depth sensor rotated into portrait.

In portrait the depth buffer is turned 90 degrees relative to the screen:

- buffer column (0..width)  runs screen BOTTOM -> TOP
- buffer row    (0..height) runs screen RIGHT  -> LEFT

So left/right zones come from the row axis, and the vertical band comes from
the column axis. Swapping the axes or dropping the row inversion mirrors
every obstacle direction.
"""

from __future__ import annotations

import numpy as np

from depthalert.bus.messages import Zone


class BufferGeometry:
    """Stateless lookups from buffer (column, row) to screen zones and points."""

    @staticmethod
    def zone_bounds(height: int) -> tuple[int, int]:
        """Return (right_end, left_start): rows < right_end are RIGHT, rows >= left_start are LEFT."""
        return height // 3, 2 * height // 3

    @staticmethod
    def map_to_zone(column: int, row: int, width: int, height: int) -> Zone:
        right_end, left_start = BufferGeometry.zone_bounds(height)
        if row < right_end:
            return Zone.RIGHT
        if row >= left_start:
            return Zone.LEFT
        return Zone.CENTER

    @staticmethod
    def map_to_screen_point(column: int, row: int, width: int, height: int) -> tuple[float, float]:
        """Normalized (x, y) screen coordinates, origin top-left."""
        x_screen = 1.0 - row / height
        y_screen = 1.0 - column / width
        return x_screen, y_screen

    @staticmethod
    def vertical_band(width: int) -> tuple[int, int]:
        """Column range [start, end) used for zone aggregation (roughly eye level)."""
        return width // 4, 3 * width // 4

    @staticmethod
    def floor_window(width: int, height: int) -> tuple[slice, slice]:
        """Row and column ranges of the floor band, as (rows, columns) without stride.

        Columns cover the bottom quarter of the screen; rows cover a band a
        quarter of the screen wide, centred horizontally.
        """
        half_band = height // 8
        rows = slice(height // 2 - half_band, height // 2 + half_band)
        columns = slice(0, width // 4)
        return rows, columns

    @staticmethod
    def zone_masks(rows: np.ndarray, height: int) -> dict[Zone, np.ndarray]:
        """Boolean masks over an array of row indices, one per zone."""
        right_end, left_start = BufferGeometry.zone_bounds(height)
        right = rows < right_end
        left = rows >= left_start
        return {
            Zone.LEFT: left,
            Zone.CENTER: ~(left | right),
            Zone.RIGHT: right,
        }
