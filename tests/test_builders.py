import numpy as np
import pytest

from mesh.builders import (
    assign_time_step,
    build_ert_mesh,
    build_section_mesh,
    layer_shape,
    parse_time_series,
)
from mesh.core.errors import FieldCountMismatch, InvalidMesh, ReadFailure


def test_ert_mesh_nodes_and_materials():
    p1 = [(0, 0, 100), (1, 0, 100), (2, 0, 100)]
    p2 = [(1, 0, 101), (2, 0, 101), (3, 0, 101)]
    z1 = [0.0, 0.0, 2.0]
    z2 = [2.0, 2.0, 4.0]
    mesh = build_ert_mesh(p1, p2, z1, z2)
    assert mesh.n_nodes == 12 and mesh.n_cells == 3
    assert mesh.nodes[:4].tolist() == [[0, 0, 100], [0, 0, 98], [1, 0, 99], [1, 0, 101]]
    assert mesh.cells[2] == (8, 9, 10, 11)
    assert mesh.cell_data["MaterialIDs"].tolist() == [0, 0, 1]
    assert mesh.name == "ERT Mesh"


def test_ert_length_mismatch():
    with pytest.raises(ReadFailure):
        build_ert_mesh([(0, 0, 0)], [(1, 0, 0)], [0.0, 1.0], [1.0])


def test_section_mesh_layout():
    mesh = build_section_mesh(x=[0, 1, 2], y=[5, 5, 5], z=[0, -1, -2, -3])
    assert mesh.n_nodes == 12
    assert mesh.n_cells == 6
    assert mesh.nodes[4].tolist() == [1.0, 5.0, -1.0]
    assert mesh.cells[0] == (0, 3, 4, 1)
    assert mesh.cell_data["MaterialIDs"].tolist() == [0, 0, 1, 1, 2, 2]
    assert layer_shape(mesh) == (3, 2)


def test_section_mesh_rejects_bad_columns():
    with pytest.raises(InvalidMesh):
        build_section_mesh([0, 1], [0], [0, 1])
    with pytest.raises(InvalidMesh):
        build_section_mesh([0, 1], [0, 1], [0])


def test_parse_time_series_blocks(tmp_path):
    path = tmp_path / "temp.csv"
    path.write_text(
        "r0,1,2\nr1,3,NaN\n\nr0,5,6\nr1,7,8\n\n",
        encoding="utf-8",
    )
    steps = parse_time_series(str(path), n_rows=2, n_cols=2)
    assert len(steps) == 2
    assert steps[0].tolist() == [1.0, 2.0, 3.0, 0.0]
    assert steps[1].tolist() == [5.0, 6.0, 7.0, 8.0]


def test_parse_time_series_errors(tmp_path):
    wrong = tmp_path / "wrong.csv"
    wrong.write_text("r0,1,2,3\n", encoding="utf-8")
    with pytest.raises(FieldCountMismatch):
        parse_time_series(str(wrong), n_rows=1, n_cols=2)

    cut = tmp_path / "cut.csv"
    cut.write_text("r0,1,2\n", encoding="utf-8")
    with pytest.raises(ReadFailure, match="Incomplete"):
        parse_time_series(str(cut), n_rows=2, n_cols=2)


def test_assign_time_step():
    mesh = build_section_mesh([0, 1, 2], [0, 0, 0], [0, -1])
    assign_time_step(mesh, [1.5, 2.5], "temp")
    assert np.array_equal(mesh.cell_data["temp"], [1.5, 2.5])
    with pytest.raises(InvalidMesh):
        assign_time_step(mesh, [1.0], "temp")
