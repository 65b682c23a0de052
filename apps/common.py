# -*- coding: utf-8 -*-
# Surveymesh/apps/common.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Helpers shared by the command-line tools: logging setup, common arguments and
exit codes.
"""

import argparse
import logging

# Exit codes
EXIT_OK = 0
EXIT_READ_ERROR = 1            # ert-to-mesh, make-buildings
EXIT_CSV_ERROR = -1            # add-emi-data
EXIT_MESH_READ_ERROR = -2      # add-emi-data, emi-to-polydata
EXIT_NOT_2D = -3               # add-emi-data, emi-to-polydata
EXIT_TS_BASE_READ = -1         # add-scalar-time-series
EXIT_TS_CSV = -2
EXIT_TS_FIELD_COUNT = -3
EXIT_TS_MISSING_STEP = -6
EXIT_TS_DECLINED = -7

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging once per process (INFO, or DEBUG with `verbose`)."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format=LOG_FORMAT)


def add_common_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    parser.add_argument("--config", help="JSON file deep-merged over the tool defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug output")
    return parser
