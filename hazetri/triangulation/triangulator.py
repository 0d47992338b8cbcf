"""
Триангуляция простых полигонов отсечением ушей по диагоналям.

На каждом шаге проверяется диагональ [1, N-1] (в обход вершины 0).
Диагональ допустима, если её середина лежит внутри полигона и она
не пересекает ни одно ребро (касание в вершинах не считается).
Если диагональ допустима: треугольник (0, 1, N-1) отрезается,
иначе путь сдвигается на одну вершину и проверка повторяется.

Сложность до O(n^3), поэтому алгоритм предназначен для запекания
данных заранее, а не для перестроения геометрии каждый кадр.
"""

from __future__ import annotations

from typing import Optional, Sequence

from hazetri import log
from hazetri.geombase.path import rotate_path_clockwise
from hazetri.geombase.predicates import point_in_polygon, segments_intersect
from hazetri.geombase.primitives import Segment, Triangle, Vec2, as_path


def is_diagonal_valid(path: Sequence[Vec2]) -> bool:
    """
    Проверить диагональ, соединяющую вершины 1 и N-1.

    Args:
        path: Замкнутый путь, не менее 3 вершин.

    Returns:
        True если диагональ целиком лежит внутри полигона.
    """
    segment = Segment(path[1], path[-1])

    if not point_in_polygon(path, segment.center):
        return False

    n = len(path)
    for i in range(n):
        p1 = path[i]
        p2 = path[(i + 1) % n]
        # Смежное ребро касается диагонали только в общей вершине
        if p1 in (segment.a, segment.b) or p2 in (segment.a, segment.b):
            continue
        hit, _ = segments_intersect(p1, p2, segment.a, segment.b, allow_on_line=False)
        if hit:
            return False

    return True


def triangulate(path_source, attempt: int = 0) -> Optional[list[Triangle]]:
    """
    Разбить простой (выпуклый или вогнутый) полигон на треугольники.

    Не гарантирует минимальное число треугольников. Направление обхода
    результирующих треугольников не определено, при необходимости
    используйте certify_winding_order.

    Args:
        path_source: Вершины полигона, последовательность (x, y)
            или np.ndarray shape (N, 2). Не изменяется.
        attempt: Начальное значение счётчика сдвигов пути.

    Returns:
        Список треугольников в порядке отсечения, или None если путь
        короче 3 вершин либо допустимая диагональ не найдена
        (обычно: самопересекающийся или вырожденный полигон).
    """
    if path_source is None:
        raise TypeError("Path source must not be None")

    path = as_path(path_source)

    if len(path) < 3:
        log.warn(f"[Triangulator] cannot triangulate path with less than 3 vertices. Path has {len(path)} vertices")
        return None

    triangles: list[Triangle] = []

    while True:
        # У трёх вершин нет диагонали: остаток и есть последний треугольник
        if len(path) == 3:
            triangles.append(Triangle(path[0], path[1], path[2]))
            log.debug(f"[Triangulator] produced {len(triangles)} triangles")
            return triangles

        if not is_diagonal_valid(path):
            if attempt > len(path):
                log.error("[Triangulator] cannot triangulate path: rotated too many times with no valid diagonal")
                return None

            # Пробуем со следующей вершины
            rotate_path_clockwise(path)
            attempt += 1
            continue

        triangles.append(Triangle(path[0], path[1], path[-1]))
        path.pop(0)

        # Форма изменилась: счётчик сдвигов начинается заново
        attempt = 0
