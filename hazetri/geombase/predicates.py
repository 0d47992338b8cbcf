"""
Геометрические предикаты для 2D полигонов.

Пересечение отрезков, принадлежность точки полигону (ray casting),
направление обхода по знаку суммы площадей, ограничивающий прямоугольник.

Система координат декартова: X вправо, Y вверх.
Все проверки: O(n) на вызов, без пространственных индексов.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence

import numpy as np

from hazetri.geombase.primitives import Segment, Triangle, Vec2
from hazetri.settings import get_settings

# Наименьшее положительное (субнормальное) float32: нижняя граница допуска сравнения
FLOAT_EPSILON = float(np.finfo(np.float32).smallest_subnormal)


class AABB2(NamedTuple):
    """Ограничивающий прямоугольник, выровненный по осям."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


def segments_intersect(
    p1: Vec2,
    p2: Vec2,
    p3: Vec2,
    p4: Vec2,
    allow_on_line: bool = True,
) -> tuple[bool, Optional[Vec2]]:
    """
    Проверить пересечение отрезков [p1, p2] и [p3, p4].

    Решает систему 2x2 для параметров u (на первом отрезке)
    и v (на втором). Параллельные и коллинеарные отрезки
    (определитель ровно 0) не пересекаются, даже если перекрываются.

    Args:
        p1, p2: Концы первого отрезка.
        p3, p4: Концы второго отрезка.
        allow_on_line: Если False, касание в концевой точке
            (u или v равно 0 или 1) не считается пересечением.

    Returns:
        (True, точка пересечения) или (False, None).
    """
    d = (p2[0] - p1[0]) * (p4[1] - p3[1]) - (p2[1] - p1[1]) * (p4[0] - p3[0])

    if d == 0.0:
        return False, None

    u = ((p3[0] - p1[0]) * (p4[1] - p3[1]) - (p3[1] - p1[1]) * (p4[0] - p3[0])) / d
    v = ((p3[0] - p1[0]) * (p2[1] - p1[1]) - (p3[1] - p1[1]) * (p2[0] - p1[0])) / d

    if u < 0.0 or u > 1.0 or v < 0.0 or v > 1.0:
        return False, None

    if not allow_on_line and (u == 0.0 or u == 1.0 or v == 0.0 or v == 1.0):
        return False, None

    x = p1[0] + u * (p2[0] - p1[0])
    y = p1[1] + u * (p2[1] - p1[1])
    return True, (x, y)


def bounding_box(path: Sequence[Vec2]) -> AABB2:
    """
    Наименьший прямоугольник, содержащий все точки пути.

    Raises:
        ValueError: Если путь пуст.
    """
    if path is None or len(path) < 1:
        raise ValueError("Path must have length 1 at least!")

    arr = np.asarray(path, dtype=np.float64).reshape(-1, 2)
    mins = arr.min(axis=0)
    maxs = arr.max(axis=0)
    return AABB2(float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1]))


def point_in_polygon(polygon: Sequence[Vec2], point: Vec2) -> bool:
    """
    Лежит ли точка внутри полигона (ray casting).

    Луч идёт из точки вправо до правой границы AABB полигона.
    Точка внутри, если луч пересекает рёбра нечётное число раз.
    Полигон может быть самопересекающимся.
    """
    if polygon is None:
        raise TypeError("Polygon must not be None")
    if point is None:
        raise TypeError("Point must not be None")

    aabb = bounding_box(polygon)
    ray = Segment((point[0], point[1]), (aabb.max_x, point[1]))

    n = len(polygon)
    intersections = 0
    for i in range(n):
        p1 = polygon[i]
        p2 = polygon[(i + 1) % n]
        hit, _ = segments_intersect(p1, p2, ray.a, ray.b)
        if hit:
            intersections += 1

    return intersections % 2 == 1


def is_polygon_clockwise(polygon: Sequence[Vec2]) -> bool:
    """
    Обходится ли полигон по часовой стрелке.

    Для самопересекающегося полигона: преобладающее направление.
    При нулевой сумме (полный баланс) возвращает True.

    Raises:
        ValueError: Если вершин меньше трёх.
    """
    if polygon is None:
        raise TypeError("Polygon must not be None")
    if len(polygon) < 3:
        raise ValueError("Polygon cannot have less than 3 vertices!")

    n = len(polygon)
    total = 0.0
    for i in range(n):
        p1 = polygon[i]
        p2 = polygon[(i + 1) % n]
        total += (p2[0] - p1[0]) * (p2[1] + p1[1])
    return total >= 0


def is_triangle_clockwise(tri: Triangle) -> bool:
    """Направление обхода треугольника в порядке a, b, c."""
    return is_polygon_clockwise([tri.a, tri.b, tri.c])


def _approximately(a: float, b: float, tolerance: float) -> bool:
    return abs(b - a) < max(tolerance * max(abs(a), abs(b)), FLOAT_EPSILON * 8)


def approximately_equal(p, q, tolerance: Optional[float] = None) -> bool:
    """
    Покомпонентное сравнение точек с относительным допуском.

    Используется только для слияния вершин меша.
    По умолчанию допуск берётся из настроек (vertex_tolerance).
    """
    if tolerance is None:
        tolerance = get_settings().vertex_tolerance
    if len(p) != len(q):
        return False
    return all(_approximately(float(a), float(b), tolerance) for a, b in zip(p, q))


def signed_area(polygon: Sequence[Vec2]) -> float:
    """Знаковая площадь полигона (положительная для CCW)."""
    if len(polygon) < 3:
        return 0.0
    arr = np.asarray(polygon, dtype=np.float64).reshape(-1, 2)
    x = arr[:, 0]
    y = arr[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0


def polygon_area(polygon: Sequence[Vec2]) -> float:
    """Площадь простого полигона."""
    return abs(signed_area(polygon))


def triangle_area(tri: Triangle) -> float:
    """Площадь треугольника."""
    return polygon_area([tri.a, tri.b, tri.c])
