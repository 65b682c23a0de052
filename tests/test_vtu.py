import numpy as np
import pytest

from mesh.core.errors import FileNotFound, ReadFailure
from mesh.core.model import Mesh
from mesh.io import read_vtu, write_vtu


def test_round_trip_keeps_order_and_arrays(tmp_path):
    nodes = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0), (2, 0, 0)]
    mesh = Mesh(name="mixed", nodes=nodes, cells=[(0, 1, 2), (1, 4, 2), (0, 1, 2, 3), (2, 3, 0)],
                cell_data={"v": np.array([1.0, 2.0, 3.0, 4.0])},
                point_data={"h": np.arange(5.0)})
    path = write_vtu(mesh, str(tmp_path / "out" / "m.vtu"))

    back = read_vtu(path)
    assert back.name == "m"
    assert back.cells == mesh.cells
    assert back.cell_types == ("triangle", "triangle", "quad", "triangle")
    assert np.allclose(back.nodes, mesh.nodes)
    assert np.allclose(back.cell_data["v"], [1.0, 2.0, 3.0, 4.0])
    assert np.allclose(back.point_data["h"], np.arange(5.0))
    assert back.dimension == 2


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFound):
        read_vtu(str(tmp_path / "missing.vtu"))


def test_garbage_file(tmp_path):
    path = tmp_path / "bad.vtu"
    path.write_text("not a mesh", encoding="utf-8")
    with pytest.raises(ReadFailure):
        read_vtu(str(path))
