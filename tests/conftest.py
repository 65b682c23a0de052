import os
import sys

import numpy as np
import pytest

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

os.environ.pop("DISPLAY", None)

from mesh.core.model import Mesh  # noqa: E402


@pytest.fixture
def unit_square():
    return Mesh(name="square", nodes=[(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)],
                cells=[(0, 1, 2, 3)])


@pytest.fixture
def two_squares():
    nodes = [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0), (1, 1, 0), (2, 1, 0)]
    return Mesh(name="two", nodes=nodes, cells=[(0, 1, 4, 3), (1, 2, 5, 4)])


@pytest.fixture
def tilted_grid():
    """3 x 3 quads over [0,3]^2 with z = x + 2y."""
    xs, ys = np.meshgrid(np.arange(4.0), np.arange(4.0))
    nodes = np.column_stack([xs.ravel(), ys.ravel(), xs.ravel() + 2 * ys.ravel()])
    cells = []
    for r in range(3):
        for c in range(3):
            a = r * 4 + c
            cells.append((a, a + 1, a + 5, a + 4))
    return Mesh(name="tilted", nodes=nodes, cells=cells)


def write_table(path, header, rows, delimiter="\t"):
    with open(path, "w", encoding="utf-8") as f:
        f.write(delimiter.join(header) + "\n")
        for row in rows:
            f.write(delimiter.join(str(v) for v in row) + "\n")
    return str(path)
