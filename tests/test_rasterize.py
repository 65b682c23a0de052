import logging

import numpy as np
import pytest

from mesh.api import add_samples_as_cell_array, require_surface
from mesh.core.errors import InvalidMesh
from mesh.core.locate import CellLocator
from mesh.core.model import Mesh
from mesh.core.rasterize import accumulate, rasterize


def test_empty_samples_give_zeros(two_squares):
    out = rasterize(two_squares, [])
    assert out.shape == (2,)
    assert np.all(out == 0.0)


def test_unit_square_scenario(unit_square):
    samples = [(0.25, 0.25, 10.0), (0.75, 0.75, 20.0), (5.0, 5.0, 999.0)]
    stats = accumulate(unit_square, samples)
    assert stats.values()[0] == 15.0
    assert stats.assigned == 2
    assert stats.dropped == 1


def test_shared_edge_sample_goes_to_one_cell(two_squares):
    out = rasterize(two_squares, [(1.0, 0.5, 7.0)])
    assert sorted(out.tolist()) == [0.0, 7.0]
    # first cell in incidence order wins
    assert out[0] == 7.0


def test_mean_per_cell_and_counts(tilted_grid):
    samples = [(0.2, 0.2, 1.0), (0.8, 0.3, 3.0), (2.5, 2.5, -4.0), (9.0, 9.0, 1.0)]
    stats = accumulate(tilted_grid, samples)
    assert stats.assigned + stats.dropped == len(samples)
    assert stats.dropped == 1
    values = stats.values()
    assert values[0] == 2.0
    assert values[8] == -4.0
    assert np.count_nonzero(values) == 2


def test_elevation_is_ignored(tilted_grid):
    # samples lie in the XY footprint even though the mesh is tilted
    assert rasterize(tilted_grid, [(1.5, 1.5, 5.0)])[4] == 5.0


def test_mesh_not_mutated(unit_square):
    before = unit_square.nodes.copy()
    rasterize(unit_square, [(0.5, 0.5, 1.0)])
    assert np.array_equal(unit_square.nodes, before)
    assert unit_square.cell_data == {}


def test_empty_mesh_raises():
    empty = Mesh(name="empty", nodes=np.zeros((0, 3)), cells=[])
    with pytest.raises(InvalidMesh):
        rasterize(empty, [(0.0, 0.0, 1.0)])


def test_mesh_without_cells_raises():
    points_only = Mesh(name="pts", nodes=[(0.0, 0.0, 0.0)], cells=[])
    with pytest.raises(InvalidMesh):
        rasterize(points_only, [(0.0, 0.0, 1.0)])


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf])
def test_non_finite_coordinates_are_dropped(unit_square, bad):
    stats = accumulate(unit_square, [(bad, 0.5, 1.0), (0.5, bad, 1.0), (0.5, 0.5, 2.0)])
    assert stats.assigned == 1
    assert stats.dropped == 2
    assert stats.values()[0] == 2.0


def test_short_samples_raise(unit_square):
    with pytest.raises(ValueError):
        rasterize(unit_square, [(0.5, 0.5)])


def test_injected_logger_receives_diagnostics(unit_square, caplog):
    log = logging.getLogger("surveymesh.test")
    with caplog.at_level(logging.DEBUG, logger="surveymesh.test"):
        accumulate(unit_square, [(3.0, 3.0, 1.0)], log=log)
    assert any("dropped" in r.getMessage() for r in caplog.records if r.name == "surveymesh.test")


def test_triangle_mesh():
    m = Mesh(name="tris", nodes=[(0, 0), (1, 0), (1, 1), (0, 1)], cells=[(0, 1, 2), (0, 2, 3)])
    out = rasterize(m, [(0.9, 0.1, 2.0), (0.1, 0.9, 6.0)])
    assert out.tolist() == [2.0, 6.0]


def test_locator_and_api(two_squares):
    loc = CellLocator(two_squares)
    assert loc.find(1.5, 0.5) == 1
    assert loc.find(3.0, 0.5) is None
    arr = add_samples_as_cell_array(two_squares, [(1.5, 0.5, 4.0)], "emi")
    assert two_squares.cell_data["emi"] is arr
    assert arr.tolist() == [0.0, 4.0]


def test_require_surface_rejects_lines():
    lines = Mesh(name="lines", nodes=[(0, 0), (1, 0)], cells=[(0, 1)])
    with pytest.raises(InvalidMesh, match="only 2d"):
        require_surface(lines)
