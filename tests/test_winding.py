"""
Тесты для приведения направления обхода и сдвига пути.
"""

import logging

import pytest

from hazetri.geombase import (
    Triangle,
    certify_winding_order,
    certify_winding_order_all,
    is_triangle_clockwise,
    rotate_path_clockwise,
)


CCW_TRI = Triangle((0, 0), (4, 0), (0, 4))
CW_TRI = Triangle((0, 0), (0, 4), (4, 0))


class TestCertifyWindingOrder:
    """Тесты для certify_winding_order."""

    def test_swaps_b_and_c(self):
        result = certify_winding_order(CCW_TRI, True)
        assert result == CW_TRI
        assert is_triangle_clockwise(result) is True

    def test_already_correct(self):
        assert certify_winding_order(CW_TRI, True) is CW_TRI
        assert certify_winding_order(CCW_TRI, False) is CCW_TRI

    def test_counterclockwise(self):
        result = certify_winding_order(CW_TRI, False)
        assert result == CCW_TRI
        assert is_triangle_clockwise(result) is False

    @pytest.mark.parametrize("clockwise", [True, False])
    def test_idempotent(self, clockwise):
        once = certify_winding_order(CCW_TRI, clockwise)
        twice = certify_winding_order(once, clockwise)
        assert once == twice

    def test_list_in_place(self):
        tris = [CCW_TRI, CW_TRI, Triangle((1, 1), (5, 1), (3, 4))]
        result = certify_winding_order_all(tris, True)
        assert result is tris
        assert all(is_triangle_clockwise(t) for t in tris)
        assert tris[1] is CW_TRI

    def test_list_none(self):
        with pytest.raises(TypeError):
            certify_winding_order_all(None, True)


class TestRotatePath:
    """Тесты для rotate_path_clockwise."""

    def test_rotate_once(self):
        path = [(0, 0), (4, 0), (4, 4), (0, 4)]
        rotate_path_clockwise(path)
        assert path == [(4, 0), (4, 4), (0, 4), (0, 0)]

    def test_full_cycle(self):
        """N сдвигов возвращают исходный путь."""
        original = [(0, 0), (6, 0), (8, 4), (3, 7), (-2, 3)]
        path = list(original)
        for _ in range(len(path)):
            rotate_path_clockwise(path)
        assert path == original

    def test_single_vertex(self):
        path = [(1, 2)]
        rotate_path_clockwise(path)
        assert path == [(1, 2)]

    def test_empty(self, caplog):
        path = []
        with caplog.at_level(logging.WARNING, logger="hazetri"):
            rotate_path_clockwise(path)
        assert path == []
        assert "no vertices" in caplog.text

    def test_none(self):
        with pytest.raises(TypeError):
            rotate_path_clockwise(None)
