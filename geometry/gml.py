# -*- coding: utf-8 -*-
# Surveymesh/geometry/gml.py

"""
Project: Surveymesh
Date: 10/16/2026

Purpose:
--------
Read and write geometry collections in the OpenGeoSys GML (XML) format.

Format:
-------
    <OpenGeoSysGLI>
      <name>...</name>
      <points><point id="0" x=".." y=".." z=".." name=".."/>...</points>
      <polylines><polyline id="0" name=".."><pnt>0</pnt>...</polyline></polylines>
      <surfaces><surface id="0" name=".."><element p1=".." p2=".." p3=".."/></surface></surfaces>
    </OpenGeoSysGLI>

Notes:
------
- Point ids in the file may be arbitrary; they are remapped to positions on read.
- Writing emits ids equal to positions, so a write -> read cycle is lossless.
- Polylines/surfaces sections are omitted when empty.
"""

import os
import logging
import xml.etree.ElementTree as ET
from typing import Dict, List

from mesh.core.errors import FileNotFound, GeometryError, ReadFailure
from .model import GeoCollection, GeoObjects, Polyline, Surface

logger = logging.getLogger(__name__)

_ROOT_TAG = "OpenGeoSysGLI"


def _local(tag: str) -> str:
    """Strip an XML namespace from a tag."""
    return tag.rsplit("}", 1)[-1]


def _child(elem, name):
    for c in elem:
        if _local(c.tag) == name:
            return c
    return None


def _children(elem, name):
    return [c for c in elem if _local(c.tag) == name] if elem is not None else []


def _ref(id_map: Dict[int, int], raw: str, path: str) -> int:
    try:
        return id_map[int(raw)]
    except (KeyError, ValueError):
        raise GeometryError("Reference to unknown point id.", {"path": path, "id": raw})


def read_gml(path: str, geo_objects: GeoObjects) -> str:
    """
    Parse a GML file and add its collection to `geo_objects`.

    Returns
    -------
    str
        Name of the collection that was added.

    Raises
    ------
    FileNotFound, ReadFailure, GeometryError
    """
    if not os.path.exists(path):
        raise FileNotFound("Geometry file not found.", {"path": path})
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as e:
        raise ReadFailure("Malformed XML: {}".format(e), {"path": path})
    if _local(root.tag) != _ROOT_TAG:
        raise ReadFailure("Not a GML geometry file.", {"path": path, "root": root.tag})

    name_el = _child(root, "name")
    name = (name_el.text or "").strip() if name_el is not None else ""
    if not name:
        name = os.path.splitext(os.path.basename(path))[0]

    coords: List[List[float]] = []
    id_map: Dict[int, int] = {}
    point_names: Dict[int, str] = {}
    for p in _children(_child(root, "points"), "point"):
        try:
            pid = int(p.get("id"))
            xyz = [float(p.get("x")), float(p.get("y")), float(p.get("z", 0.0))]
        except (TypeError, ValueError):
            raise GeometryError("Point with missing or non-numeric attributes.",
                                {"path": path, "attrib": dict(p.attrib)})
        if pid in id_map:
            raise GeometryError("Duplicate point id.", {"path": path, "id": pid})
        id_map[pid] = len(coords)
        if p.get("name"):
            point_names[len(coords)] = p.get("name")
        coords.append(xyz)

    polylines = []
    for ply in _children(_child(root, "polylines"), "polyline"):
        ids = [_ref(id_map, (pnt.text or "").strip(), path) for pnt in _children(ply, "pnt")]
        polylines.append(Polyline(points=ids, name=ply.get("name")))

    surfaces = []
    for sfc in _children(_child(root, "surfaces"), "surface"):
        tris = []
        for el in _children(sfc, "element"):
            tris.append(tuple(_ref(id_map, el.get(k, ""), path) for k in ("p1", "p2", "p3")))
        surfaces.append(Surface(triangles=tris, name=sfc.get("name")))

    geo = GeoCollection(name=name, points=coords, polylines=polylines,
                        surfaces=surfaces, point_names=point_names)
    geo_objects.add(geo, replace=True)
    logger.info("[read_gml] '%s': %d points, %d polylines, %d surfaces.",
                name, geo.n_points, len(polylines), len(surfaces))
    return name


def _fmt(v: float) -> str:
    return repr(float(v))


def to_gml_string(geo_objects: GeoObjects, name: str) -> str:
    """Serialize collection `name` to a GML string."""
    geo = geo_objects.get(name)
    root = ET.Element(_ROOT_TAG)
    ET.SubElement(root, "name").text = geo.name

    pts_el = ET.SubElement(root, "points")
    for i, (x, y, z) in enumerate(geo.points):
        attrib = {"id": str(i), "x": _fmt(x), "y": _fmt(y), "z": _fmt(z)}
        if i in geo.point_names:
            attrib["name"] = geo.point_names[i]
        ET.SubElement(pts_el, "point", attrib)

    if geo.polylines:
        plys_el = ET.SubElement(root, "polylines")
        for i, ply in enumerate(geo.polylines):
            attrib = {"id": str(i)}
            if ply.name:
                attrib["name"] = ply.name
            ply_el = ET.SubElement(plys_el, "polyline", attrib)
            for p in ply.points:
                ET.SubElement(ply_el, "pnt").text = str(int(p))

    if geo.surfaces:
        sfcs_el = ET.SubElement(root, "surfaces")
        for i, sfc in enumerate(geo.surfaces):
            attrib = {"id": str(i)}
            if sfc.name:
                attrib["name"] = sfc.name
            sfc_el = ET.SubElement(sfcs_el, "surface", attrib)
            for a, b, c in sfc.triangles:
                ET.SubElement(sfc_el, "element", {"p1": str(int(a)), "p2": str(int(b)), "p3": str(int(c))})

    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return '<?xml version="1.0" encoding="UTF-8"?>\n' + body + "\n"


def write_gml(geo_objects: GeoObjects, name: str, path: str) -> str:
    """
    Write collection `name` to `path`; returns the path.
    """
    text = to_gml_string(geo_objects, name)
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    logger.info("[write_gml] '%s' written to %s", name, path)
    return path
