# -*- coding: utf-8 -*-
# Surveymesh/apps/add_emi_data.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Add EMI survey data to a 2D surface mesh as per-cell arrays.

For each dipole (H, V) the samples of all region files <csv>_<region>_<dipole>.txt
are rasterized onto the mesh; the cell mean is stored as TM_DD_<dipole>.

Exit codes:
-----------
    0 ok, -1 CSV error, -2 mesh read error, -3 mesh is not 2D
"""

import argparse
import logging

from mesh.api import add_samples_as_cell_array, require_surface
from mesh.core.errors import InvalidMesh, ReadFailure, EmptyInput
from mesh.io import read_vtu, write_vtu
from fileio.emi import read_emi_samples
from apps.common import (
    EXIT_OK, EXIT_CSV_ERROR, EXIT_MESH_READ_ERROR, EXIT_NOT_2D,
    add_common_arguments, setup_logging,
)
from apps.config import load_config

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="add-emi-data",
        description="Add EMI data as a scalar cell array to a 2d mesh."
    )
    parser.add_argument("-i", "--mesh-input-file", required=True,
                        help="the name of the file containing the input mesh")
    parser.add_argument("-o", "--mesh-output-file", required=True,
                        help="the name of the file the mesh will be written to")
    parser.add_argument("--csv", required=True,
                        help="base name of the EMI csv files (<csv>_<region>_<dipole>.txt)")
    parser.add_argument("--plot", help="save a preview of the first new array to this PNG")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        cfg = load_config(args.config)
    except ReadFailure as e:
        logger.error("Error reading config file: %s", e)
        return EXIT_MESH_READ_ERROR
    emi = cfg["emi"]

    logger.info("Reading mesh %s.", args.mesh_input_file)
    try:
        mesh = read_vtu(args.mesh_input_file)
    except ReadFailure as e:
        logger.error("Error reading mesh file: %s", e)
        return EXIT_MESH_READ_ERROR
    try:
        require_surface(mesh)
    except InvalidMesh as e:
        logger.error("%s", e)
        return EXIT_NOT_2D
    logger.info("Mesh read: %d nodes, %d elements.", mesh.n_nodes, mesh.n_cells)

    names = []
    for dipole in emi["dipoles"]:
        try:
            samples = read_emi_samples(
                args.csv, dipole,
                regions=emi["regions"],
                delimiter=cfg["csv"]["delimiter"],
                point_columns=emi["point_columns"],
                value_column=emi["value_column"],
            )
        except (ReadFailure, EmptyInput) as e:
            logger.error("Error reading CSV-file: %s", e)
            return EXIT_CSV_ERROR
        name = emi["array_prefix"] + dipole
        add_samples_as_cell_array(mesh, samples, name, max_per_bin=cfg["grid"]["max_per_bin"])
        names.append(name)

    logger.info("Writing result...")
    write_vtu(mesh, args.mesh_output_file)

    if args.plot and names:
        from post.plot_mesh import plot_cell_array
        plot_cell_array(mesh, names[0], show=False, save_path=args.plot)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
