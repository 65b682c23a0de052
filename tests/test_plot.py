import numpy as np
import pytest

from post.plot_mesh import plot_cell_array


def test_plot_cell_array_saves_png(tilted_grid, tmp_path):
    tilted_grid.add_cell_array("v", np.arange(tilted_grid.n_cells, dtype=float))
    out = tmp_path / "v.png"
    plot_cell_array(tilted_grid, "v", show=False, save_path=str(out), samples=[(0.5, 0.5, 1.0)])
    assert out.exists() and out.stat().st_size > 0


def test_plot_unknown_array(unit_square):
    with pytest.raises(KeyError):
        plot_cell_array(unit_square, "missing", show=False)
