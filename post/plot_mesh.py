# -*- coding: utf-8 -*-
# Surveymesh/post/plot_mesh.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose
-------
Quick visualization of per-cell arrays on 2D meshes using matplotlib.

Main Tasks
----------
    1) Draw triangle/quad cells as filled polygons coloured by a cell array
       (`plot_cell_array`), e.g. rasterized EMI values or material ids.
    2) Optionally mark the survey samples on top of the cells.
"""

import os
import logging
import numpy as np

from mesh.core.model import CELL_DIMENSION

logger = logging.getLogger(__name__)


def _get_pyplot():
    """
    Import matplotlib.pyplot with a headless-safe backend if needed.

    Returns
    -------
    module
        The matplotlib.pyplot module.

    Raises
    ------
    RuntimeError
        If matplotlib cannot be imported.
    """
    try:
        import matplotlib
        # Agg when DISPLAY is not set, before pyplot is imported
        if not os.environ.get("DISPLAY"):
            matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError("matplotlib is required for plotting: {}".format(e))


def plot_cell_array(
    mesh,
    name,
    show=True,
    save_path=None,
    *,
    samples=None,
    cmap="viridis",
    linewidth=0.2,
):
    """
    Plot the 2D cells of `mesh` coloured by cell array `name`.

    Parameters
    ----------
    mesh : Mesh
        Mesh holding the cell array.
    name : str
        Cell array to colour by.
    show : bool, optional
        Whether to display the figure (ignored on non-GUI backends). Default True.
    save_path : str, optional
        If given, save the figure (PNG) to this path.
    samples : array-like, optional
        (M,>=2) sample positions drawn as small dots.
    cmap : str, optional
        Matplotlib colormap name.
    linewidth : float, optional
        Cell edge width.

    Raises
    ------
    KeyError
        If `name` is not a cell array of `mesh`.
    ValueError
        If the mesh has no triangle or quad cells.
    """
    from matplotlib.collections import PolyCollection

    if name not in mesh.cell_data:
        raise KeyError("Cell array '{}' not found; available: {}".format(name, sorted(mesh.cell_data)))
    values = np.asarray(mesh.cell_data[name], dtype=float)

    polys, colours = [], []
    for cid, (conn, ctype) in enumerate(zip(mesh.cells, mesh.cell_types)):
        if CELL_DIMENSION.get(ctype) != 2:
            continue
        polys.append(mesh.nodes[list(conn), :2])
        colours.append(values[cid])
    if not polys:
        raise ValueError("No triangle or quad elements found in the mesh.")

    plt = _get_pyplot()
    fig = plt.figure(figsize=(8, 8))
    ax = fig.add_subplot(111)

    pc = PolyCollection(polys, array=np.asarray(colours), cmap=cmap,
                        edgecolors="k", linewidths=linewidth)
    ax.add_collection(pc)
    fig.colorbar(pc, ax=ax, label=name)

    if samples is not None:
        s = np.asarray(samples, dtype=float)
        if s.size:
            ax.scatter(s[:, 0], s[:, 1], s=2, c="r", alpha=0.6)

    ax.autoscale()
    ax.set_aspect("equal", adjustable="box")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title("{}: {}".format(mesh.name, name))

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")
        logger.info("[plot_cell_array] Plot saved to: %s", save_path)

    backend = plt.get_backend().lower()
    if show and not backend.startswith("agg"):
        plt.show()
    else:
        plt.close(fig)
