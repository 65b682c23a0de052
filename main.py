# -*- coding: utf-8 -*-
# Surveymesh/main.py

"""
Tool dispatcher:
  python main.py <tool> [tool options]

  add-emi-data            EMI samples -> cell arrays on a 2D mesh
  emi-to-polydata         EMI samples -> GML point sets + value lists
  ert-to-mesh             ERT table -> quad mesh
  make-buildings          building footprints -> 3D geometry
  add-scalar-time-series  CSV time series -> per-step cell arrays

`python main.py <tool> -h` shows the options of one tool.
"""

import sys

from apps.registry import TOOLS, get_tool


def _usage() -> str:
    lines = ["usage: main.py <tool> [options]", "", "tools:"]
    for tool in TOOLS.values():
        lines.append("  {:<24} {}".format(tool.id, tool.description))
    return "\n".join(lines)


def main(argv=None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] in ("-h", "--help"):
        print(_usage())
        return 0
    try:
        tool = get_tool(argv[0])
    except KeyError:
        print("Unknown tool '{}'.\n\n{}".format(argv[0], _usage()), file=sys.stderr)
        return 2
    return tool.main(argv[1:])


if __name__ == "__main__":
    sys.exit(main())
