# -*- coding: utf-8 -*-
# Surveymesh/apps/make_buildings.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Use polygons from building plans (GML polylines) to create simple 3D objects.
The first geometry of the input file is extruded by the given height and written
as collection "output".

Exit codes:
-----------
    0 ok, 1 read error
"""

import argparse
import logging

from geometry import GeoObjects, make_buildings, read_gml, write_gml
from mesh.core.errors import GeometryError, ReadFailure
from apps.common import EXIT_OK, EXIT_READ_ERROR, add_common_arguments, setup_logging
from apps.config import load_config

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="make-buildings",
        description="Uses polygons from building plans to create 3d objects."
    )
    parser.add_argument("-i", "--geo-input-file", required=True,
                        help="the name of the file containing the input geometry")
    parser.add_argument("-o", "--geo-output-file", required=True,
                        help="the name of the file the 3d geometry will be written to")
    parser.add_argument("-s", "--size", type=float, required=True,
                        help="height of the 3d objects (buildings) in metres")
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

    logger.info("Reading geometry %s.", args.geo_input_file)
    geo_objects = GeoObjects()
    try:
        name = read_gml(args.geo_input_file, geo_objects)
    except (ReadFailure, GeometryError) as e:
        logger.error("Error reading geometry: %s", e)
        return EXIT_READ_ERROR

    output_name = cfg["buildings"]["output_name"]
    geo_objects.add(make_buildings(geo_objects.get(name), args.size, name=output_name), replace=True)
    write_gml(geo_objects, output_name, args.geo_output_file)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
