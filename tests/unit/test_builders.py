"""Unit tests for shape-to-polygon builders.

Tests cover:
- Rectangle corners, winding and fixed triangles
- Point-list parsing and triangulation
- Path linearization, dedup and triangulation
- Fill parsing and attribute errors
"""

import pytest

from svgmesh.core.builders import (
    parse_fill,
    parse_point_list,
    polygon_from_path,
    polygon_from_points,
    polygon_from_rect,
)
from svgmesh.domain import Color, Element, Point, Polygon, Triangle, parse_color
from svgmesh.exceptions import (
    ColorFormatError,
    ConfigurationError,
    DoubleDecimalPointError,
    InvalidAttributeError,
    UnterminatedPathError,
)


def _assert_valid_triangles(polygon: Polygon) -> None:
    for tri in polygon.triangles:
        indices = list(tri)
        assert len(set(indices)) == 3
        assert all(0 <= i < polygon.vertex_count for i in indices)


def _covered_area(polygon: Polygon) -> float:
    total = 0.0
    for a, b, c in polygon.triangle_points():
        total += abs((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0
    return total


class TestRect:
    """Tests for polygon_from_rect."""

    def test_corners_winding_corrected(self):
        element = Element("rect", {"x": "0", "y": "0", "width": "2", "height": "1"})
        polygon = polygon_from_rect(element)

        # (0,0) (0,1) (2,1) (2,0) is clockwise, so it comes back reversed
        assert polygon.exterior.points == (Point(2, 0), Point(2, 1), Point(0, 1), Point(0, 0))
        assert polygon.exterior.signed_area() > 0

    def test_fixed_triangles_cover_all_vertices(self):
        element = Element("rect", {"x": "0", "y": "0", "width": "2", "height": "1"})
        polygon = polygon_from_rect(element)

        assert polygon.triangles == (Triangle(0, 1, 2), Triangle(2, 3, 0))
        assert {i for t in polygon.triangles for i in t} == {0, 1, 2, 3}
        assert _covered_area(polygon) == 2.0

    def test_offset_rect(self):
        element = Element("rect", {"x": "1.5", "y": "-2", "width": "3", "height": "4"})
        polygon = polygon_from_rect(element)
        assert set(polygon.exterior) == {
            Point(1.5, -2), Point(1.5, 2), Point(4.5, 2), Point(4.5, -2)
        }

    @pytest.mark.parametrize("missing", ["x", "y", "width", "height"])
    def test_missing_attribute(self, missing):
        attributes = {"x": "0", "y": "0", "width": "1", "height": "1"}
        del attributes[missing]
        with pytest.raises(InvalidAttributeError) as exc_info:
            polygon_from_rect(Element("rect", attributes))
        assert exc_info.value.attribute == missing
        assert exc_info.value.value is None

    def test_malformed_attribute(self):
        element = Element("rect", {"x": "0", "y": "0", "width": "10px", "height": "1"})
        with pytest.raises(InvalidAttributeError) as exc_info:
            polygon_from_rect(element)
        assert exc_info.value.value == "10px"

    def test_fill(self):
        element = Element(
            "rect", {"x": "0", "y": "0", "width": "1", "height": "1", "fill": "#00f"}
        )
        assert polygon_from_rect(element).fill == Color(0.0, 0.0, 1.0, 1.0)


class TestPointList:
    """Tests for polygon_from_points."""

    def test_parse_mixed_separators(self):
        element = Element("polygon", {"points": " 0,0 4 0,4,3\n0 3 "})
        assert parse_point_list(element) == [Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3)]

    def test_unpaired_coordinate_dropped(self):
        element = Element("polygon", {"points": "0,0 4,0 4,3 7"})
        assert parse_point_list(element) == [Point(0, 0), Point(4, 0), Point(4, 3)]

    def test_empty(self):
        assert parse_point_list(Element("polygon")) == []

    def test_malformed_coordinate(self):
        element = Element("polygon", {"points": "0,0 4,abc 4,3"})
        with pytest.raises(InvalidAttributeError) as exc_info:
            parse_point_list(element)
        assert exc_info.value.value == "abc"

    def test_ccw_kept(self):
        element = Element("polygon", {"points": "0,0 4,0 4,3 0,3"})
        polygon = polygon_from_points(element)
        assert polygon.exterior.points == (Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3))
        assert len(polygon.triangles) == 2
        _assert_valid_triangles(polygon)
        assert _covered_area(polygon) == pytest.approx(12.0)

    def test_cw_reversed(self):
        element = Element("polygon", {"points": "0,0 0,3 4,3 4,0"})
        polygon = polygon_from_points(element)
        assert polygon.exterior.points == (Point(4, 0), Point(4, 3), Point(0, 3), Point(0, 0))

    def test_concave(self):
        element = Element("polygon", {"points": "0,0 2,0 2,1 1,1 1,2 0,2", "fill": "#808080"})
        polygon = polygon_from_points(element)
        assert len(polygon.triangles) == 4
        _assert_valid_triangles(polygon)
        assert _covered_area(polygon) == pytest.approx(3.0)
        assert polygon.fill == parse_color("#808080")

    def test_too_few_points(self):
        polygon = polygon_from_points(Element("polygon", {"points": "0,0 1,1"}))
        assert polygon.triangles == ()

    def test_collinear(self):
        polygon = polygon_from_points(Element("polygon", {"points": "0,0 1,0 2,0"}))
        assert polygon.exterior.points == (Point(0, 0), Point(1, 0), Point(2, 0))
        assert polygon.triangles == ()


class TestPath:
    """Tests for polygon_from_path."""

    def test_square(self):
        polygon = polygon_from_path(Element("path", {"d": "M0 0 H4 V3 H0 Z"}))
        assert polygon.exterior.points == (Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3))
        _assert_valid_triangles(polygon)
        assert _covered_area(polygon) == pytest.approx(12.0)

    def test_closing_point_removed(self):
        polygon = polygon_from_path(Element("path", {"d": "M0 0 L4 0 L4 3 L0 0 Z"}))
        assert polygon.exterior.points == (Point(0, 0), Point(4, 0), Point(4, 3))
        assert polygon.triangles and set(polygon.triangles[0]) == {0, 1, 2}

    def test_curve_dedup_and_winding(self):
        polygon = polygon_from_path(Element("path", {"d": "M0 0 C0 1 1 1 1 0 Z"}), 0.5)
        # Linearized as (0,0) (0,0) (0.5,0.75) (1,0): clockwise once deduplicated
        assert polygon.exterior.points == (Point(1, 0), Point(0.5, 0.75), Point(0, 0))
        assert len(polygon.triangles) == 1
        _assert_valid_triangles(polygon)

    def test_curve_resolution_controls_vertices(self):
        d = "M0 0 C0 10 10 10 10 0 Z"
        coarse = polygon_from_path(Element("path", {"d": d}), 0.5)
        fine = polygon_from_path(Element("path", {"d": d}), 0.125)
        assert fine.vertex_count > coarse.vertex_count
        _assert_valid_triangles(fine)

    @pytest.mark.parametrize(
        ("d", "expected"),
        [
            ("M0 0 L1 0 L2 0 Z", (Point(0, 0), Point(1, 0), Point(2, 0))),
            ("M0 0 H5 H10 Z", (Point(0, 0), Point(5, 0), Point(10, 0))),
        ],
    )
    def test_collinear_outline(self, d, expected):
        polygon = polygon_from_path(Element("path", {"d": d}))
        assert polygon.exterior.points == expected
        assert polygon.triangles == ()

    def test_parse_error_propagates(self):
        with pytest.raises(DoubleDecimalPointError):
            polygon_from_path(Element("path", {"d": "M0 0 L1.2.3 4 Z"}))

    def test_missing_d(self):
        with pytest.raises(UnterminatedPathError):
            polygon_from_path(Element("path"))

    def test_invalid_resolution(self):
        with pytest.raises(ConfigurationError):
            polygon_from_path(Element("path", {"d": "M0 0 L1 0 L0 1 Z"}), 0)

    def test_bad_fill(self):
        element = Element("path", {"d": "M0 0 L1 0 L0 1 Z", "fill": "red"})
        with pytest.raises(ColorFormatError):
            polygon_from_path(element)


class TestFill:
    """Tests for parse_fill."""

    def test_absent(self):
        assert parse_fill(Element("rect")) == Color()

    def test_empty(self):
        assert parse_fill(Element("rect", {"fill": ""})) == Color()

    def test_present(self):
        assert parse_fill(Element("rect", {"fill": "#FF0000"})) == Color(1.0, 0.0, 0.0, 1.0)
