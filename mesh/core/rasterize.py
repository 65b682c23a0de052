# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/rasterize.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Transfer scattered survey samples (x, y, value) onto the cells of a surface mesh:
each cell receives the mean value of the samples that fall inside its footprint.

Main Tasks:
-----------
    1) Project the mesh onto z=0 and build a `CellLocator` (grid + adjacency).
    2) For each sample, find the containing cell via the nearest node's incident cells.
    3) Accumulate value sums and counts per cell; samples outside every tested cell
       are dropped and counted.
    4) Average: sum / count per cell, 0 where no sample landed.

Notes:
------
- Empty sample sets are valid and give an all-zero result.
- The mesh is never mutated; attaching the result is the caller's job
  (see `mesh.api.add_samples_as_cell_array`).
- Diagnostics go to the injected logger (or this module's logger).
"""

from dataclasses import dataclass
from typing import Optional
import logging
import numpy as np

from .errors import InvalidMesh
from .locate import CellLocator
from .model import Mesh

logger = logging.getLogger(__name__)


@dataclass
class RasterStats:
    """
    Per-cell accumulation state of one rasterization call.

    Attributes
    ----------
    sums : np.ndarray
        (C,) sum of assigned sample values per cell.
    counts : np.ndarray
        (C,) number of samples assigned per cell.
    assigned : int
        Samples that landed in a cell.
    dropped : int
        Samples outside every tested cell (assigned + dropped == number of samples).
    """
    sums: np.ndarray
    counts: np.ndarray
    assigned: int = 0
    dropped: int = 0

    def values(self) -> np.ndarray:
        """Per-cell mean (0 where no sample landed)."""
        out = np.zeros_like(self.sums)
        hit = self.counts > 0
        out[hit] = self.sums[hit] / self.counts[hit]
        return out


def _as_samples(samples) -> np.ndarray:
    arr = np.asarray(samples, dtype=float)
    if arr.size == 0:
        return np.zeros((0, 3), dtype=float)
    if arr.ndim != 2 or arr.shape[1] < 3:
        raise ValueError("samples must be an (M,3) array of (x, y, value); got shape {}.".format(arr.shape))
    return arr


def accumulate(mesh: Mesh, samples, *, log: Optional[logging.Logger] = None,
               max_per_bin: int = 16) -> RasterStats:
    """
    Assign every sample to at most one cell and accumulate sums and counts.

    Parameters
    ----------
    mesh : Mesh
        Surface mesh; z is ignored for the lookup.
    samples : array-like
        (M,>=3) rows of (x, y, value). May be empty.
    log : logging.Logger, optional
        Sink for diagnostic events.
    max_per_bin : int, optional
        Target number of nodes per spatial grid bin.

    Returns
    -------
    RasterStats

    Raises
    ------
    InvalidMesh
        If the mesh has zero nodes or zero cells.
    """
    log = log or logger
    if mesh.n_nodes == 0 or mesh.n_cells == 0:
        raise InvalidMesh("Cannot rasterize onto a mesh without nodes or cells.",
                          {"name": mesh.name, "n_nodes": mesh.n_nodes, "n_cells": mesh.n_cells})

    pts = _as_samples(samples)
    stats = RasterStats(sums=np.zeros(mesh.n_cells, dtype=float),
                        counts=np.zeros(mesh.n_cells, dtype=np.int64))
    if len(pts) == 0:
        log.info("[rasterize] No samples given; all %d cells keep 0.", mesh.n_cells)
        return stats

    locator = CellLocator(mesh, max_per_bin=max_per_bin)
    for x, y, value in pts[:, :3]:
        cid = locator.find(x, y)
        if cid is None:
            stats.dropped += 1
            log.debug("[rasterize] Sample (%g, %g) is outside the mesh; dropped.", x, y)
            continue
        stats.sums[cid] += value
        stats.counts[cid] += 1
        stats.assigned += 1

    log.info("[rasterize] %d samples: %d assigned to %d cells, %d dropped.",
             len(pts), stats.assigned, int(np.count_nonzero(stats.counts)), stats.dropped)
    return stats


def rasterize(mesh: Mesh, samples, *, log: Optional[logging.Logger] = None) -> np.ndarray:
    """
    Per-cell mean of the sample values that fall inside each cell.

    Returns
    -------
    np.ndarray
        (C,) float64, index-aligned with `mesh.cells`; 0 for cells without samples.
    """
    return accumulate(mesh, samples, log=log).values()
