import math

import numpy as np
import pytest

from depthalert.bus.messages import DepthFrame, ObstacleSummary, Zone
from depthalert.errors import FrameShapeError
from depthalert.perception.zone_analyzer import ZoneAnalyzer
from tests.helpers import make_frame

# 12x12 frames with stride 4 sample rows 0 (right), 4 (center), 8 (left)
# and columns 3 and 7.


def _grid(value=5.0, size=12):
    return np.full((size, size), value, dtype=np.float32)


def test_uniform_frame():
    summary = ZoneAnalyzer().analyze(make_frame(_grid(2.5)))
    for zone in Zone:
        stats = summary.zones[zone]
        assert stats.min_distance == pytest.approx(2.5)
        assert stats.avg_distance == pytest.approx(2.5)
        assert stats.obstacle_presence == 0.0
    assert summary.nearest_zone == Zone.LEFT
    assert summary.farthest_distance == pytest.approx(2.5)
    # First sample in scan order: column 3, row 0
    assert summary.farthest_point == pytest.approx((1.0, 0.75))


@pytest.mark.parametrize("invalid", [0.0, -1.0, 10.0, 25.0, float("nan"), float("inf")])
def test_fully_invalid_frame_is_all_clear(invalid):
    summary = ZoneAnalyzer().analyze(make_frame(_grid(invalid)))
    for stats in summary.zones.values():
        assert math.isinf(stats.min_distance)
        assert math.isinf(stats.avg_distance)
        assert stats.obstacle_presence == 0
    assert math.isinf(summary.nearest_distance)
    assert summary.farthest_distance == 0
    assert summary.farthest_point == pytest.approx((0.5, 0.5))


def test_empty_summary_matches_all_invalid_frame():
    summary = ZoneAnalyzer().analyze(make_frame(_grid(0.0)))
    empty = ObstacleSummary.empty()
    assert summary.zones == empty.zones
    assert summary.nearest_zone == empty.nearest_zone
    assert summary.farthest_distance == empty.farthest_distance


def test_zone_with_only_invalid_samples_is_clear():
    grid = _grid(1.5)
    grid[0:4, :] = 0.0
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert math.isinf(summary.right.min_distance)
    assert math.isinf(summary.right.avg_distance)
    assert summary.right.obstacle_presence == 0
    assert summary.left.min_distance == pytest.approx(1.5)
    assert summary.left.obstacle_presence == 1.0


def test_nearest_tie_prefers_left():
    grid = _grid(5.0)
    grid[0, 3] = 1.2   # right
    grid[8, 7] = 1.2   # left
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.left.min_distance == summary.right.min_distance
    assert summary.nearest_zone == Zone.LEFT
    assert summary.nearest_distance == pytest.approx(1.2)


def test_nearest_tie_center_beats_right():
    grid = _grid(5.0)
    grid[0, 3] = 1.2   # right
    grid[4, 3] = 1.2   # center
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.nearest_zone == Zone.CENTER


def test_low_rows_are_screen_right():
    grid = _grid(5.0)
    grid[0, 7] = 0.4
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.nearest_zone == Zone.RIGHT
    assert summary.nearest_distance == pytest.approx(0.4)


def test_zone_average_and_presence():
    grid = _grid(5.0)
    grid[4, 3] = 1.0
    grid[4, 7] = 3.0
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.center.min_distance == pytest.approx(1.0)
    assert summary.center.avg_distance == pytest.approx(2.0)
    assert summary.center.obstacle_presence == pytest.approx(0.5)


def test_unsampled_positions_are_ignored():
    grid = _grid(5.0)
    grid[5, 5] = 0.2    # row between strides
    grid[0, 0] = 0.2    # column below the eye-level band
    grid[0, 10] = 0.2   # column above the eye-level band
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.nearest_distance == pytest.approx(5.0)


def test_stride_is_configurable():
    grid = _grid(5.0)
    grid[5, 5] = 0.2
    summary = ZoneAnalyzer(stride=1).analyze(make_frame(grid))
    assert summary.nearest_distance == pytest.approx(0.2)
    assert summary.nearest_zone == Zone.CENTER


def test_invalid_stride_rejected():
    with pytest.raises(ValueError):
        ZoneAnalyzer(stride=0)


def test_upper_bound_is_exclusive():
    grid = _grid(10.0)
    grid[4, 3] = 9.99
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.center.min_distance == pytest.approx(9.99)
    assert math.isinf(summary.left.min_distance)


def test_farthest_point_location():
    grid = _grid(1.0)
    grid[8, 7] = 9.0
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    assert summary.farthest_distance == pytest.approx(9.0)
    assert summary.farthest_point == pytest.approx((1 - 8 / 12, 1 - 7 / 12))


def test_farthest_tie_takes_first_in_scan_order():
    grid = _grid(1.0)
    grid[0, 7] = 9.0
    grid[8, 3] = 9.0
    summary = ZoneAnalyzer().analyze(make_frame(grid))
    # Columns are scanned outermost, so column 3 is reached first
    assert summary.farthest_point == pytest.approx((1 - 8 / 12, 1 - 3 / 12))


def test_nearest_is_min_of_zone_minimums():
    rng = np.random.default_rng(7)
    analyzer = ZoneAnalyzer()
    for _ in range(20):
        grid = rng.uniform(-1.0, 12.0, size=(48, 64)).astype(np.float32)
        summary = analyzer.analyze(make_frame(grid))
        zone_mins = [s.min_distance for s in summary.zones.values()]
        assert summary.nearest_distance == min(zone_mins)
        assert summary.zones[summary.nearest_zone].min_distance == summary.nearest_distance


def test_summary_carries_frame_timestamp():
    summary = ZoneAnalyzer().analyze(make_frame(_grid(), timestamp=12.5))
    assert summary.timestamp == 12.5


@pytest.mark.parametrize("width, height, size", [(0, 12, 0), (12, 0, 0), (12, 12, 100)])
def test_malformed_frames_rejected(width, height, size):
    frame = DepthFrame(width=width, height=height, samples=np.ones(size, dtype=np.float32))
    with pytest.raises(FrameShapeError):
        ZoneAnalyzer().analyze(frame)


def test_frame_shape_error_is_value_error():
    assert issubclass(FrameShapeError, ValueError)
