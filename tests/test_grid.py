import numpy as np
import pytest

from mesh.core.errors import InvalidMesh
from mesh.core.grid import NodeGrid


def _brute(points, x, y):
    d2 = (points[:, 0] - x) ** 2 + (points[:, 1] - y) ** 2
    return int(np.argmin(d2))


def test_nearest_matches_brute_force():
    rng = np.random.RandomState(7)
    pts = rng.rand(500, 2) * [100.0, 20.0]
    grid = NodeGrid(pts, max_per_bin=8)
    for x, y in rng.rand(200, 2) * [120.0, 40.0] - [10.0, 10.0]:
        assert grid.nearest(x, y) == _brute(pts, x, y)


def test_bins_follow_aspect_ratio():
    rng = np.random.RandomState(1)
    pts = rng.rand(1600, 2) * [40.0, 10.0]
    nx, ny = NodeGrid(pts, max_per_bin=16).shape
    assert nx > ny


def test_collinear_and_single_point():
    line = np.column_stack([np.arange(10.0), np.zeros(10)])
    assert NodeGrid(line).nearest(3.4, 5.0) == 3
    assert NodeGrid([[2.0, 2.0]]).nearest(-50.0, 80.0) == 0


def test_empty_point_set_raises():
    with pytest.raises(InvalidMesh):
        NodeGrid(np.zeros((0, 2)))
