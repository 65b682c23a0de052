import numpy as np
import pytest

from mesh.core.errors import InvalidMesh
from mesh.core.model import Mesh, build_node_cells
from mesh.core.projection import flatten, project_onto_plane


def test_adjacency_ascending_and_cached(two_squares):
    adj = two_squares.node_cells()
    assert adj[1] == (0, 1)
    assert adj[0] == (0,)
    assert two_squares.node_cells() is adj


def test_build_node_cells_repeated_node():
    assert build_node_cells([(0, 0, 1)], 2) == ((0,), (0,))


def test_cell_types_inferred_and_dimension():
    m = Mesh(name="mixed", nodes=[(0, 0), (1, 0), (0, 1)], cells=[(0, 1), (0, 1, 2)])
    assert m.cell_types == ("line", "triangle")
    assert m.dimension == 2
    assert m.nodes.shape == (3, 3)


def test_dangling_node_reference_raises():
    with pytest.raises(InvalidMesh):
        Mesh(name="bad", nodes=[(0, 0, 0)], cells=[(0, 1, 2)])


def test_cell_array_length_checked(unit_square):
    with pytest.raises(InvalidMesh):
        unit_square.add_cell_array("x", [1.0, 2.0])
    unit_square.add_cell_array("x", [3.0])
    assert unit_square.cell_data["x"][0] == 3.0


def test_flatten_round_trip_exact(tilted_grid):
    flat = flatten(tilted_grid)
    assert np.all(flat.nodes[:, 2] == 0.0)
    restored = flat.nodes.copy()
    restored[:, 2] = tilted_grid.nodes[:, 2]
    assert np.array_equal(restored, tilted_grid.nodes)
    assert flat.cells == tilted_grid.cells


def test_project_onto_plane_preserves_topology(tilted_grid):
    proj = project_onto_plane(tilted_grid)
    assert np.array_equal(proj.nodes[:, :2], tilted_grid.nodes[:, :2])
    assert np.allclose(proj.nodes[:, 2], 0.0)
    assert proj.node_cells() == tilted_grid.node_cells()
    assert tilted_grid.nodes[:, 2].max() > 0.0


def test_project_zero_normal_raises(unit_square):
    with pytest.raises(ValueError):
        project_onto_plane(unit_square, normal=(0, 0, 0))
