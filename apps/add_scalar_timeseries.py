# -*- coding: utf-8 -*-
# Surveymesh/apps/add_scalar_timeseries.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Add a scalar array time series from a CSV file to an existing layered mesh, or to
an existing time series of meshes.

Modes:
------
    -b base.vtu        one base mesh; step k is written to <output>k.vtu
    --grid X Y Z       base mesh built as a section grid from three column files
    (neither)          <output>k.vtu must already exist; the array is added to each

The array is named after the CSV file (base name without extension). All steps
are expected to share the layout (max(MaterialIDs) + 1 rows) of the first mesh.

Exit codes:
-----------
    0 ok, -1 base mesh error, -2 CSV error, -3 wrong field count,
    -6 missing mesh for a time step, -7 overwrite declined
"""

import argparse
import logging
import os

from mesh.builders import assign_time_step, build_section_mesh, layer_shape, parse_time_series
from mesh.core.errors import FieldCountMismatch, InvalidMesh, ReadFailure
from mesh.io import read_vtu, write_vtu
from fileio.csv_interface import read_column
from apps.common import (
    EXIT_OK, EXIT_TS_BASE_READ, EXIT_TS_CSV, EXIT_TS_FIELD_COUNT,
    EXIT_TS_MISSING_STEP, EXIT_TS_DECLINED,
    add_common_arguments, setup_logging,
)
from apps.config import load_config

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="add-scalar-time-series",
        description="Adds a scalar array time series from a csv-file to an existing mesh "
                    "or a time series of meshes."
    )
    base = parser.add_mutually_exclusive_group()
    base.add_argument("-b", "--base",
                      help="single base mesh a time series of vtu-files is created from")
    base.add_argument("--grid", nargs=3, metavar=("X", "Y", "Z"),
                      help="build the base mesh from column files of x, y (per column) and z (per row)")
    parser.add_argument("-t", "--output", required=True,
                        help="base name of the output files, e.g. 'output' -> output0.vtu, output1.vtu, ...")
    parser.add_argument("-i", "--csv", required=True,
                        help="csv-file with all time steps, separated by empty lines")
    parser.add_argument("--force", action="store_true", help="overwrite existing output without asking")
    add_common_arguments(parser)
    return parser.parse_args(argv)


def confirm_overwrite(path: str, ask=None) -> bool:
    """Ask until the answer is y/Y/n/N."""
    ask = ask or input
    answer = ""
    while answer not in ("y", "Y", "n", "N"):
        logger.warning("Output file %s already exists. Overwrite? (y/n)", path)
        answer = ask().strip()
    return answer in ("y", "Y")


def step_path(output: str, k: int) -> str:
    return "{}{}.vtu".format(output, k)


def _load_base(args, cfg):
    if args.base:
        return read_vtu(args.base)
    col = cfg["timeseries"]["grid_column"]
    x, y, z = (read_column(p, delimiter=cfg["csv"]["delimiter"], column=col) for p in args.grid)
    return build_section_mesh(x, y, z)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)
    try:
        cfg = load_config(args.config)
    except ReadFailure as e:
        logger.error("Error reading config file: %s", e)
        return EXIT_TS_BASE_READ
    ts = cfg["timeseries"]
    prop_name = os.path.splitext(os.path.basename(args.csv))[0]

    base = None
    if args.base or args.grid:
        try:
            base = _load_base(args, cfg)
            shape = layer_shape(base, ts["material_key"])
        except (ReadFailure, InvalidMesh) as e:
            logger.error("Error reading base mesh: %s", e)
            return EXIT_TS_BASE_READ
    else:
        try:
            shape = layer_shape(read_vtu(step_path(args.output, 0)), ts["material_key"])
        except (ReadFailure, InvalidMesh) as e:
            logger.error("No base mesh given and no mesh for time step 0 found: %s", e)
            return EXIT_TS_MISSING_STEP

    try:
        steps = parse_time_series(args.csv, shape[0], shape[1], nan_value=ts["nan_value"])
    except FieldCountMismatch as e:
        logger.error("%s", e)
        return EXIT_TS_FIELD_COUNT
    except ReadFailure as e:
        logger.error("Could not read CSV file: %s", e)
        return EXIT_TS_CSV

    overwrite = args.force
    for k, values in enumerate(steps):
        out = step_path(args.output, k)
        if base is not None:
            mesh = base
        else:
            try:
                mesh = read_vtu(out)
            except ReadFailure as e:
                logger.error("No base mesh given and no mesh for time step %d found: %s", k, e)
                return EXIT_TS_MISSING_STEP
        try:
            assign_time_step(mesh, values, prop_name)
        except InvalidMesh as e:
            logger.error("%s", e)
            return EXIT_TS_FIELD_COUNT

        if not overwrite and os.path.exists(out):
            if not confirm_overwrite(out):
                return EXIT_TS_DECLINED
            overwrite = True
        logger.info("Writing result #%d...", k)
        write_vtu(mesh, out)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
