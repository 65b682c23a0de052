# -*- coding: utf-8 -*-
# Surveymesh/apps/ert_to_mesh.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Convert an ERT table (tab-separated, header row) into a quad mesh.

Columns (by header name, configurable):
    E1 N1 H1  E2 N2 H2  z1/m z2/m

Exit codes:
-----------
    0 ok, 1 read error
"""

import argparse
import logging

from mesh.builders import build_ert_mesh
from mesh.core.errors import ReadFailure
from mesh.io import write_vtu
from fileio.csv_interface import read_column, read_points
from apps.common import EXIT_OK, EXIT_READ_ERROR, add_common_arguments, setup_logging
from apps.config import load_config

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="ert-to-mesh",
        description="Converts a CSV file containing ERT data to a quad mesh."
    )
    parser.add_argument("-i", "--csv-input-file", required=True,
                        help="CSV-file containing ERT information")
    parser.add_argument("-o", "--mesh-output-file", required=True,
                        help="the name of the new mesh file")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        cfg = load_config(args.config)
    except ReadFailure as e:
        logger.error("Error reading config file: %s", e)
        return EXIT_READ_ERROR
    ert = cfg["ert"]
    path, delimiter = args.csv_input_file, cfg["csv"]["delimiter"]

    try:
        points1 = read_points(path, delimiter=delimiter, columns=ert["points1"])
        points2 = read_points(path, delimiter=delimiter, columns=ert["points2"])
        z1 = read_column(path, delimiter=delimiter, column=ert["z1"])
        z2 = read_column(path, delimiter=delimiter, column=ert["z2"])
        mesh = build_ert_mesh(points1, points2, z1, z2, name=ert["mesh_name"])
    except ReadFailure as e:
        logger.error("Error reading data from file: %s", e)
        return EXIT_READ_ERROR

    logger.info("Writing result...")
    write_vtu(mesh, args.mesh_output_file)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
