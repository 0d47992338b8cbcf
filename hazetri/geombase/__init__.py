"""
Базовые геометрические классы и предикаты (Geometric Base).

Содержит:
- Triangle, Segment - примитивы
- предикаты: пересечение отрезков, точка в полигоне, направление обхода
- certify_winding_order - приведение обхода треугольников
- rotate_path_clockwise - циклический сдвиг пути
"""

from .primitives import Vec2, Vec3, Segment, Triangle, as_point, as_path
from .predicates import (
    AABB2,
    FLOAT_EPSILON,
    segments_intersect,
    bounding_box,
    point_in_polygon,
    is_polygon_clockwise,
    is_triangle_clockwise,
    approximately_equal,
    signed_area,
    polygon_area,
    triangle_area,
)
from .winding import certify_winding_order, certify_winding_order_all
from .path import rotate_path_clockwise

__all__ = [
    'Vec2',
    'Vec3',
    'Segment',
    'Triangle',
    'as_point',
    'as_path',
    'AABB2',
    'FLOAT_EPSILON',
    'segments_intersect',
    'bounding_box',
    'point_in_polygon',
    'is_polygon_clockwise',
    'is_triangle_clockwise',
    'approximately_equal',
    'signed_area',
    'polygon_area',
    'triangle_area',
    'certify_winding_order',
    'certify_winding_order_all',
    'rotate_path_clockwise',
]
