# -*- coding: utf-8 -*-
# Surveymesh/apps/emi_to_polydata.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Convert EMI survey tables into point geometries (GML) plus plain value lists.

For each dipole D:
    <out>_D.gml : collection "EMI Data D" with all survey positions, optionally
                  draped onto a surface DEM (-s)
    <out>_D.txt : one measurement per line

Exit codes:
-----------
    0 ok, -1 CSV error, -2 DEM read error, -3 DEM is not 2D
"""

import argparse
import logging
import numpy as np

from mesh.api import require_surface
from mesh.core.errors import EmptyInput, InvalidMesh, ReadFailure
from mesh.io import read_vtu
from geometry import GeoCollection, GeoObjects, map_collection, write_gml
from fileio.emi import read_emi_points, read_emi_values
from apps.common import (
    EXIT_OK, EXIT_CSV_ERROR, EXIT_MESH_READ_ERROR, EXIT_NOT_2D,
    add_common_arguments, setup_logging,
)
from apps.config import load_config

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="emi-to-polydata",
        description="Convert EMI csv files to point geometries and value lists."
    )
    parser.add_argument("-i", "--csv-input-file", required=True,
                        help="base name of the EMI csv files (<base>_<region>_<dipole>.txt)")
    parser.add_argument("-o", "--polydata-output-file", required=True,
                        help="base name of the output files")
    parser.add_argument("-s", "--dem-file", help="surface DEM (.vtu) the points are mapped onto")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def write_values(values, path: str) -> str:
    """One value per line."""
    with open(path, "w", encoding="utf-8") as f:
        for v in np.asarray(values, dtype=float):
            f.write("{}\n".format(repr(float(v))))
    return path


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        cfg = load_config(args.config)
    except ReadFailure as e:
        logger.error("Error reading config file: %s", e)
        return EXIT_MESH_READ_ERROR
    emi = cfg["emi"]
    delimiter = cfg["csv"]["delimiter"]

    dem = None
    if args.dem_file:
        try:
            dem = read_vtu(args.dem_file)
        except ReadFailure as e:
            logger.error("Error reading mesh file: %s", e)
            return EXIT_MESH_READ_ERROR
        try:
            require_surface(dem)
        except InvalidMesh as e:
            logger.error("%s", e)
            return EXIT_NOT_2D
        logger.info("Surface mesh read: %d nodes, %d elements.", dem.n_nodes, dem.n_cells)

    geo_objects = GeoObjects()
    for dipole in emi["dipoles"]:
        try:
            points = read_emi_points(args.csv_input_file, dipole, regions=emi["regions"],
                                     delimiter=delimiter, columns=emi["point_columns"])
            values = read_emi_values(args.csv_input_file, dipole, regions=emi["regions"],
                                     delimiter=delimiter, column=emi["value_column"])
        except (ReadFailure, EmptyInput) as e:
            logger.error("Error reading CSV-file: %s", e)
            return EXIT_CSV_ERROR

        geo = geo_objects.add(GeoCollection(name=emi["geometry_prefix"] + dipole, points=points))
        if dem is not None:
            map_collection(geo, dem)

        out = args.polydata_output_file
        write_gml(geo_objects, geo.name, "{}_{}.gml".format(out, dipole))
        write_values(values, "{}_{}.txt".format(out, dipole))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
