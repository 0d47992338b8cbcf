"""
Тесты для геометрических предикатов.
"""

import numpy as np
import pytest

from hazetri.geombase import (
    FLOAT_EPSILON,
    Segment,
    Triangle,
    bounding_box,
    point_in_polygon,
    is_polygon_clockwise,
    is_triangle_clockwise,
    approximately_equal,
    segments_intersect,
    signed_area,
    polygon_area,
    triangle_area,
)
from hazetri.settings import SettingsManager, TriangulatorSettings


SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4)]


class TestSegmentsIntersect:
    """Тесты для segments_intersect."""

    def test_crossing_diagonals(self):
        """Диагонали квадрата пересекаются в центре."""
        hit, point = segments_intersect((0, 0), (4, 4), (0, 4), (4, 0))
        assert hit is True
        assert point == pytest.approx((2.0, 2.0))

    def test_parallel(self):
        """Параллельные отрезки не пересекаются."""
        hit, point = segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))
        assert hit is False
        assert point is None

    def test_collinear_overlap_is_not_reported(self):
        """Перекрывающиеся коллинеарные отрезки: определитель 0, пересечения нет."""
        hit, _ = segments_intersect((0, 0), (4, 0), (2, 0), (6, 0))
        assert hit is False

    def test_out_of_range(self):
        """Прямые пересекаются, но за пределами отрезка."""
        hit, _ = segments_intersect((0, 0), (1, 1), (3, 0), (3, 5))
        assert hit is False

    def test_touching_endpoint(self):
        """Касание в конце отрезка зависит от allow_on_line."""
        hit, point = segments_intersect((0, 0), (2, 0), (2, 0), (2, 2))
        assert hit is True
        assert point == pytest.approx((2.0, 0.0))

        hit, point = segments_intersect((0, 0), (2, 0), (2, 0), (2, 2), allow_on_line=False)
        assert hit is False
        assert point is None

    def test_t_junction(self):
        """Конец второго отрезка лежит внутри первого."""
        hit, _ = segments_intersect((0, 0), (4, 0), (2, 0), (2, 3), allow_on_line=False)
        assert hit is False
        hit, point = segments_intersect((0, 0), (4, 0), (2, 0), (2, 3))
        assert hit is True
        assert point == pytest.approx((2.0, 0.0))


class TestBoundingBox:
    """Тесты для bounding_box."""

    def test_box(self):
        aabb = bounding_box([(1, 2), (-3, 5), (4, -1)])
        assert aabb == (-3.0, -1.0, 4.0, 5.0)
        assert aabb.max_x == 4.0

    def test_single_point(self):
        aabb = bounding_box([(1.5, -2.0)])
        assert aabb == (1.5, -2.0, 1.5, -2.0)

    def test_empty(self):
        with pytest.raises(ValueError):
            bounding_box([])


class TestPointInPolygon:
    """Тесты для point_in_polygon."""

    def test_square(self):
        assert point_in_polygon(SQUARE, (2, 2)) is True
        assert point_in_polygon(SQUARE, (5, 5)) is False

    def test_outside_left(self):
        assert point_in_polygon(SQUARE, (-1, 2)) is False

    def test_concave(self):
        """Вогнутый полигон: точка в выемке снаружи."""
        chevron = [(0, 0), (2, 1), (4, 0), (2, 4)]
        assert point_in_polygon(chevron, (2, 2.5)) is True
        assert point_in_polygon(chevron, (2, 0.5)) is False

    def test_numpy_polygon(self):
        polygon = np.array(SQUARE, dtype=np.float64)
        assert point_in_polygon(polygon, np.array([1.0, 3.0])) is True

    def test_none(self):
        with pytest.raises(TypeError):
            point_in_polygon(None, (0, 0))

    def test_empty_polygon(self):
        with pytest.raises(ValueError):
            point_in_polygon([], (0, 0))


class TestWinding:
    """Тесты для направления обхода."""

    def test_counterclockwise_square(self):
        assert is_polygon_clockwise(SQUARE) is False

    def test_clockwise_square(self):
        assert is_polygon_clockwise(list(reversed(SQUARE))) is True

    def test_degenerate_is_clockwise(self):
        """Нулевая сумма трактуется как обход по часовой."""
        assert is_polygon_clockwise([(0, 0), (1, 1), (2, 2)]) is True

    def test_too_short(self):
        with pytest.raises(ValueError):
            is_polygon_clockwise([(0, 0), (1, 1)])

    def test_triangle(self):
        tri = Triangle((0, 0), (4, 0), (0, 4))
        assert is_triangle_clockwise(tri) is False
        assert is_triangle_clockwise(Triangle(tri.a, tri.c, tri.b)) is True


class TestApproximatelyEqual:
    """Тесты для approximately_equal."""

    def test_small_difference(self):
        assert approximately_equal((1.0, 1.0, 0.0), (1.0 + 1e-7, 1.0, 0.0)) is True

    def test_large_difference(self):
        assert approximately_equal((1.0, 1.0, 0.0), (1.001, 1.0, 0.0)) is False

    def test_zero(self):
        assert approximately_equal((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)) is True

    def test_explicit_tolerance(self):
        assert approximately_equal((100.0, 0.0, 0.0), (100.5, 0.0, 0.0), tolerance=1e-2) is True

    def test_tiny_components_differ(self):
        """Нижняя граница допуска: субнормальное float32, а не нормализованное."""
        assert FLOAT_EPSILON == float(np.finfo(np.float32).smallest_subnormal)
        assert approximately_equal((0.0, 0.0, 0.0), (1e-40, 0.0, 0.0)) is False
        assert approximately_equal((0.0, 0.0, 0.0), (1e-46, 0.0, 0.0)) is True

    def test_tolerance_from_settings(self):
        manager = SettingsManager.instance()
        try:
            manager.settings = TriangulatorSettings(vertex_tolerance=1e-2)
            assert approximately_equal((1.0, 0.0, 0.0), (1.005, 0.0, 0.0)) is True
        finally:
            manager.reset()
        assert approximately_equal((1.0, 0.0, 0.0), (1.005, 0.0, 0.0)) is False


class TestAreas:
    """Тесты для площадей и примитивов."""

    def test_signed_area(self):
        assert signed_area(SQUARE) == pytest.approx(16.0)
        assert signed_area(list(reversed(SQUARE))) == pytest.approx(-16.0)

    def test_polygon_area(self):
        chevron = [(0, 0), (2, 1), (4, 0), (2, 4)]
        assert polygon_area(chevron) == pytest.approx(6.0)

    def test_triangle_area(self):
        assert triangle_area(Triangle((0, 0), (4, 0), (0, 4))) == pytest.approx(8.0)

    def test_segment_center(self):
        assert Segment((0, 0), (4, 2)).center == (2.0, 1.0)
