# -*- coding: utf-8 -*-
# Surveymesh/mesh/core/errors.py


"""
Project: Surveymesh
Date: 10/16/2026

Purpose
-------
Typed exceptions shared by the mesh, geometry and file layers, with compact,
context-aware messages so every tool reports failures the same way.

Main Tasks
----------
    1. Define SurveymeshError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: ReadFailure, FileNotFound, InvalidMesh, EmptyInput,
       GeometryError, FieldCountMismatch.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- A sample that falls outside every cell is not an error; the rasterizer counts it.
"""

__all__ = [
    "SurveymeshError",
    "ReadFailure",
    "FileNotFound",
    "InvalidMesh",
    "EmptyInput",
    "GeometryError",
    "FieldCountMismatch",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class SurveymeshError(Exception):
    """
    Base class for all errors raised by Surveymesh.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"path": "a.csv", "line": 12}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(SurveymeshError, self).__init__(message)

    def __str__(self):
        base = super(SurveymeshError, self).__str__()
        return base + _format_context(self.context)


class ReadFailure(SurveymeshError):
    """
    Input file exists but could not be parsed:
      - unknown header name or column index out of range
      - non-numeric field where a number is required
      - inconsistent column lengths between related inputs
    """


class FileNotFound(ReadFailure):
    """Input file is missing."""


class InvalidMesh(SurveymeshError):
    """
    Mesh cannot be used for the requested operation:
      - zero nodes or zero cells
      - wrong dimensionality (e.g. a 3D mesh where a surface is required)
      - cell references a node index that does not exist
    """


class EmptyInput(SurveymeshError):
    """No sample data was found where a whole-program run needs some."""


class GeometryError(SurveymeshError):
    """Malformed geometry collection (bad point references, unknown names, broken GML)."""


class FieldCountMismatch(ReadFailure):
    """A table row has a different number of fields than the mesh layout requires."""
