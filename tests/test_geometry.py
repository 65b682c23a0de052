import numpy as np
import pytest

from geometry import (
    GeoCollection,
    GeoObjects,
    Polyline,
    Surface,
    make_buildings,
    map_onto_surface,
    read_gml,
    to_gml_string,
    write_gml,
)
from mesh.core.errors import GeometryError, InvalidMesh, ReadFailure
from mesh.core.model import Mesh

GML = """<?xml version="1.0" encoding="UTF-8"?>
<OpenGeoSysGLI xmlns:ogs="http://www.opengeosys.org">
  <name>plans</name>
  <points>
    <point id="10" x="0" y="0" z="1"/>
    <point id="11" x="4" y="0" z="1" name="corner"/>
    <point id="12" x="4" y="3" z="1"/>
  </points>
  <polylines>
    <polyline id="0" name="house">
      <pnt>10</pnt><pnt>11</pnt><pnt>12</pnt><pnt>10</pnt>
    </polyline>
  </polylines>
  <surfaces>
    <surface id="0"><element p1="10" p2="11" p3="12"/></surface>
  </surfaces>
</OpenGeoSysGLI>
"""


def _footprint():
    return GeoCollection(
        name="plans",
        points=[(0, 0, 0), (1, 0, 0), (1, 1, 0)],
        polylines=[Polyline(points=[0, 1, 2])],
        surfaces=[Surface(triangles=[(0, 1, 2)])],
    )


def test_read_gml_remaps_ids(tmp_path):
    path = tmp_path / "plans.gml"
    path.write_text(GML, encoding="utf-8")
    geo_objects = GeoObjects()
    name = read_gml(str(path), geo_objects)
    geo = geo_objects.get(name)
    assert name == "plans"
    assert geo.points.shape == (3, 3)
    assert geo.polylines[0].points == [0, 1, 2, 0]
    assert geo.polylines[0].name == "house"
    assert geo.surfaces[0].triangles == [(0, 1, 2)]
    assert geo.point_names == {1: "corner"}


def test_write_then_read(tmp_path):
    geo_objects = GeoObjects()
    geo_objects.add(_footprint())
    path = write_gml(geo_objects, "plans", str(tmp_path / "sub" / "out.gml"))
    other = GeoObjects()
    read_gml(path, other)
    back = other.get("plans")
    assert np.array_equal(back.points, geo_objects.get("plans").points)
    assert back.polylines[0].points == [0, 1, 2]


def test_gml_string_omits_empty_sections():
    geo_objects = GeoObjects()
    geo_objects.add(GeoCollection(name="pts", points=[(0.5, 1.5)]))
    text = to_gml_string(geo_objects, "pts")
    assert "<points>" in text
    assert "<polylines" not in text and "<surfaces" not in text


def test_bad_reference_and_bad_xml(tmp_path):
    bad_ref = tmp_path / "ref.gml"
    bad_ref.write_text(GML.replace("<pnt>12</pnt>", "<pnt>99</pnt>"), encoding="utf-8")
    with pytest.raises(GeometryError):
        read_gml(str(bad_ref), GeoObjects())
    broken = tmp_path / "broken.gml"
    broken.write_text("<OpenGeoSysGLI><points>", encoding="utf-8")
    with pytest.raises(ReadFailure):
        read_gml(str(broken), GeoObjects())


def test_duplicate_point_id_rejected(tmp_path):
    dup = tmp_path / "dup.gml"
    dup.write_text(GML.replace('id="12"', 'id="10"'), encoding="utf-8")
    with pytest.raises(GeometryError, match="Duplicate point id"):
        read_gml(str(dup), GeoObjects())


def test_gml_string_is_indented():
    geo_objects = GeoObjects()
    geo_objects.add(_footprint())
    text = to_gml_string(geo_objects, "plans")
    assert "\n  <name>plans</name>" in text


def test_duplicate_name_rejected():
    geo_objects = GeoObjects()
    geo_objects.add(_footprint())
    with pytest.raises(GeometryError):
        geo_objects.add(_footprint())


def test_make_buildings_layout():
    src = _footprint()
    out = make_buildings(src, 5.0)
    P = src.n_points
    assert out.name == "output"
    assert out.n_points == 2 * P
    assert np.array_equal(out.points[P:, 2], src.points[:, 2] + 5.0)
    assert len(out.polylines) == 1
    # original surface, one wall, one roof
    assert len(out.surfaces) == 3
    assert out.surfaces[1].triangles == [(1, 0, 3), (1, 3, 4), (2, 1, 4), (2, 4, 5)]
    assert out.surfaces[2].triangles == [(3, 4, 5)]
    assert src.n_points == P


def test_map_onto_surface(tilted_grid):
    pts = np.array([(0.5, 0.5, 100.0), (2.0, 1.0, 0.0), (10.0, 0.0, 0.0)])
    mapped = map_onto_surface(pts, tilted_grid)
    assert np.isclose(mapped[0, 2], 1.5)
    assert np.isclose(mapped[1, 2], 4.0)
    # outside: elevation of nearest node (3, 0)
    assert mapped[2, 2] == 3.0
    assert pts[0, 2] == 100.0


def test_map_onto_surface_leaves_non_finite_points(tilted_grid):
    pts = np.array([(np.nan, 0.5, 7.0), (np.inf, 0.5, 8.0), (0.5, 0.5, 0.0)])
    mapped = map_onto_surface(pts, tilted_grid)
    assert mapped[0, 2] == 7.0
    assert mapped[1, 2] == 8.0
    assert np.isclose(mapped[2, 2], 1.5)


def test_map_onto_surface_requires_2d():
    lines = Mesh(name="l", nodes=[(0, 0), (1, 0)], cells=[(0, 1)])
    with pytest.raises(InvalidMesh):
        map_onto_surface([(0.5, 0.0, 0.0)], lines)
